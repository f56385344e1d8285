"""
Casos de uso para inicializar datos: noticias de la carga masiva,
cuenta de administrador y fuentes RSS por defecto.
"""
from typing import Any, Dict, List, Optional

from services.news.app.application.import_bulk_news_use_case import ImportBulkNewsUseCase, ImportBulkResult
from services.news.app.config import (
    DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, DEFAULT_RSS_SOURCES
)
from services.news.app.domain.entities import AdminCredentials
from services.news.app.domain.exceptions import InvalidCredentialError
from services.news.app.domain.interfaces import BootstrapRepository
from services.news.app.domain.validators import is_valid_email, is_valid_password, is_valid_username
from shared.config.settings import Settings, settings as default_settings
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


def admin_credentials_from_settings(settings: Settings = default_settings) -> AdminCredentials:
    """Credenciales del entorno; los valores vacíos usan los valores por defecto."""
    return AdminCredentials(
        email=settings.ADMIN_EMAIL or DEFAULT_ADMIN_EMAIL,
        username=settings.ADMIN_USERNAME or DEFAULT_ADMIN_USERNAME,
        password=settings.ADMIN_PASSWORD or DEFAULT_ADMIN_PASSWORD
    )


def validate_admin_credentials(credentials: AdminCredentials) -> None:
    if not is_valid_email(credentials.email):
        raise InvalidCredentialError("invalid admin email format")
    if not is_valid_password(credentials.password):
        raise InvalidCredentialError("admin password must contain at least one letter and one number")
    if not is_valid_username(credentials.username):
        raise InvalidCredentialError("invalid admin username format")


class SeedAllDataUseCase:
    """
    Importa todos los datos iniciales.
    La generación de eventos no se hace aquí: se dispara aparte.
    """

    def __init__(self, import_use_case: ImportBulkNewsUseCase):
        self.import_use_case = import_use_case

    def execute(self, location: str) -> ImportBulkResult:
        logger.info("🚀 Iniciando carga de datos iniciales...")

        result = self.import_use_case.execute(location)

        logger.info("ℹ️ Importación de noticias finalizada. Los eventos se generan mediante su endpoint de administración")
        logger.info("🏁 Carga de datos iniciales completada")
        return result


class SeedDefaultDataUseCase:
    """
    Crea la cuenta de administrador y las fuentes RSS por defecto.
    Ambas operaciones son idempotentes: solo actúan si no existe nada previo.
    """

    def __init__(self, bootstrap_repository: BootstrapRepository):
        self.bootstrap_repository = bootstrap_repository

    def seed_initial_admin(self, credentials: Optional[AdminCredentials] = None) -> bool:
        """
        Crea el administrador inicial.

        Returns:
            True si se creó, False si ya existía un administrador

        Raises:
            InvalidCredentialError: formato de email, contraseña o usuario inválido
            ConflictError: el email o el usuario ya pertenecen a otra cuenta
        """
        credentials = credentials or admin_credentials_from_settings()
        created = self.bootstrap_repository.create_admin_if_absent(credentials, validate_admin_credentials)

        if created:
            logger.info("👤 Cuenta de administrador inicial creada:")
            logger.info(f"   - Usuario: {credentials.username}")
            logger.info(f"   - Email: {credentials.email}")
            logger.warning("⚠️ Cambie la contraseña por defecto tras el primer inicio de sesión")
        return created

    def seed_rss_sources(self, sources: Optional[List[Dict[str, Any]]] = None) -> int:
        """Crea las fuentes RSS por defecto si no existe ninguna. Retorna cuántas creó."""
        created = self.bootstrap_repository.create_rss_sources_if_absent(
            sources if sources is not None else DEFAULT_RSS_SOURCES
        )
        if created:
            logger.info(f"📡 {created} fuentes RSS por defecto creadas")
        return created

    def execute(self, credentials: Optional[AdminCredentials] = None) -> bool:
        """Datos por defecto: por ahora solo el administrador inicial."""
        return self.seed_initial_admin(credentials)
