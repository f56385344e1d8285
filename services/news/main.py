"""
News Service - Servicio de Noticias
Importación masiva con deduplicación, asociación de noticias a eventos
y consultas (listados, populares, búsqueda).
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from services.news.api.endpoints import news_router
from services.news.app.application.import_bulk_news_use_case import ImportBulkNewsUseCase
from services.news.app.application.seed_data_use_case import SeedAllDataUseCase, SeedDefaultDataUseCase
from services.news.app.domain.exceptions import (
    ConflictError, NewsServiceError, NotFoundError, NothingUpdatedError, StorageError, ValidationError
)
from services.news.app.infrastructure.batch_writer import SqlAlchemyBatchWriter
from services.news.app.infrastructure.bootstrap_repository import SqlAlchemyBootstrapRepository
from services.news.app.infrastructure.database_repository import SqlAlchemyNewsRepository
from services.news.app.infrastructure.json_bulk_source import JsonBulkNewsSource
from shared.config.settings import settings
from shared.database.session import health_check, init_database
from shared.services.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def start_news_service():
    """
    Inicializa la base de datos y los datos por defecto.
    """
    setup_logging()
    logger.info("📰 Iniciando News Service...")

    logger.info("🗄️ Inicializando base de datos...")
    init_database()

    seed_use_case = SeedDefaultDataUseCase(SqlAlchemyBootstrapRepository())
    seed_use_case.execute()
    seed_use_case.seed_rss_sources()

    if settings.SEED_ON_STARTUP:
        repository = SqlAlchemyNewsRepository()
        import_use_case = ImportBulkNewsUseCase(
            bulk_source=JsonBulkNewsSource(),
            news_repository=repository,
            batch_writer=SqlAlchemyBatchWriter()
        )
        SeedAllDataUseCase(import_use_case).execute(settings.NEWS_SEED_FILE)

    logger.info("✅ News Service iniciado correctamente")


# Gestor de Ciclo de Vida para FastAPI
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Iniciando FastAPI del News Service...")
    try:
        start_news_service()
    except NewsServiceError as e:
        logger.error(f"❌ Error al cargar los datos iniciales: {e}")

    yield

    # Shutdown
    logger.info("🛑 Cerrando FastAPI del News Service...")


def error_status(error: NewsServiceError) -> int:
    """Código HTTP de cada familia de errores del dominio."""
    if isinstance(error, (ValidationError, NothingUpdatedError)):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, ConflictError):
        return 409
    return 500


def create_app(lifespan_handler: Optional[object] = lifespan) -> FastAPI:
    app = FastAPI(
        title=f"{settings.PROJECT_NAME} - News Service",
        version="1.0.0",
        description="Importación, deduplicación y asociación de noticias con eventos",
        lifespan=lifespan_handler  # type: ignore
    )
    app.include_router(news_router, prefix=settings.API_V1_STR)

    @app.exception_handler(NewsServiceError)
    async def news_service_error_handler(request: Request, exc: NewsServiceError):
        status_code = error_status(exc)
        if isinstance(exc, StorageError):
            logger.error(f"❌ Error de almacenamiento en {request.url.path}: {exc}")
        return JSONResponse(status_code=status_code, content={"code": status_code, "message": str(exc), "data": None})

    @app.get("/", tags=["Service"])
    def read_root():
        """Endpoint básico para verificar que el servicio está vivo."""
        return {
            "service": "news",
            "status": "alive",
            "description": "Importación masiva, deduplicación y asociación de noticias a eventos"
        }

    @app.get("/health", tags=["Service"])
    def health():
        db_healthy = health_check()
        return {
            "service": "news",
            "status": "healthy" if db_healthy else "degraded",
            "database": {"connected": db_healthy}
        }

    return app


app = create_app()
