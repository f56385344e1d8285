#!/usr/bin/env python3
"""
Script de Carga Inicial - Noticias, administrador y fuentes RSS
================================================================

Importa las noticias de un fichero JSON ({"news_items": [...]}) solo si la
base de datos no tiene ninguna noticia, y crea la cuenta de administrador y
las fuentes RSS por defecto si no existen.

Uso:
    python seed_news_data.py [ruta_json] [--skip-admin] [--skip-rss]
"""

import argparse
import os
import sys

# Añadir el directorio raíz al path para importar módulos
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from services.news.app.application.import_bulk_news_use_case import ImportBulkNewsUseCase
from services.news.app.application.seed_data_use_case import SeedAllDataUseCase, SeedDefaultDataUseCase
from services.news.app.domain.exceptions import NewsServiceError
from services.news.app.infrastructure.batch_writer import SqlAlchemyBatchWriter
from services.news.app.infrastructure.bootstrap_repository import SqlAlchemyBootstrapRepository
from services.news.app.infrastructure.database_repository import SqlAlchemyNewsRepository
from services.news.app.infrastructure.json_bulk_source import JsonBulkNewsSource
from shared.config.settings import settings
from shared.database.session import init_database
from shared.services.logging_config import setup_logging, get_logger

# Configurar logging
setup_logging()
logger = get_logger(__name__)


def main():
    """Función principal del script."""
    parser = argparse.ArgumentParser(
        description='Carga inicial de noticias desde un fichero JSON y datos por defecto'
    )
    parser.add_argument(
        'file_path',
        nargs='?',
        default=settings.NEWS_SEED_FILE,
        help='Ruta al fichero JSON con las noticias'
    )
    parser.add_argument('--skip-admin', action='store_true', help='No crear la cuenta de administrador')
    parser.add_argument('--skip-rss', action='store_true', help='No crear las fuentes RSS por defecto')

    args = parser.parse_args()

    if not os.path.exists(args.file_path):
        logger.error(f"El archivo no existe: {args.file_path}")
        sys.exit(1)

    try:
        init_database()

        import_use_case = ImportBulkNewsUseCase(
            bulk_source=JsonBulkNewsSource(),
            news_repository=SqlAlchemyNewsRepository(),
            batch_writer=SqlAlchemyBatchWriter()
        )
        result = SeedAllDataUseCase(import_use_case).execute(args.file_path)
        logger.info(f"📊 Importadas: {result.imported} | Duplicadas: {result.skipped} | Errores: {result.errors}")

        seed_use_case = SeedDefaultDataUseCase(SqlAlchemyBootstrapRepository())
        if not args.skip_admin:
            seed_use_case.seed_initial_admin()
        if not args.skip_rss:
            seed_use_case.seed_rss_sources()
    except NewsServiceError as e:
        logger.error(f"❌ Error en la carga inicial: {e}")
        sys.exit(1)

    logger.info("[OK] Carga inicial completada")


if __name__ == "__main__":
    main()
