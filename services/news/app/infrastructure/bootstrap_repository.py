"""
Repositorio para los datos iniciales: cuenta de administrador y fuentes RSS.
Cada comprobación de existencia se hace dentro de la misma transacción
que la inserción.
"""
import hashlib
import secrets
from typing import Any, Callable, Dict, List
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from services.news.app.domain.entities import AdminCredentials
from services.news.app.domain.exceptions import ConflictError, StorageError
from services.news.app.domain.interfaces import BootstrapRepository
from shared.database.models import RSSSource, User
from shared.database.session import SessionLocal, session_scope
from shared.services.logging_config import get_logger


logger = get_logger(__name__)

ADMIN_ROLE = "admin"
ACTIVE_STATUS = "active"
PBKDF2_ITERATIONS = 260000


def hash_password(password: str) -> str:
    """Hash PBKDF2-SHA256 en formato algoritmo$iteraciones$sal$hash."""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt.encode('utf-8'), PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    algorithm, iterations, salt, expected = encoded.split('$', 3)
    if algorithm != "pbkdf2_sha256":
        return False
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt.encode('utf-8'), int(iterations))
    return secrets.compare_digest(digest.hex(), expected)


class SqlAlchemyBootstrapRepository(BootstrapRepository):

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def create_admin_if_absent(self, credentials: AdminCredentials,
                               validate: Callable[[AdminCredentials], None]) -> bool:
        try:
            with session_scope(self._session_factory) as session:
                admin_count = session.query(func.count(User.id)).filter(User.role == ADMIN_ROLE).scalar() or 0
                if admin_count > 0:
                    logger.info("ℹ️ Ya existe una cuenta de administrador, se omite la creación")
                    return False

                validate(credentials)

                existing = session.query(User).filter(or_(
                    User.email == credentials.email,
                    User.username == credentials.username
                )).first()
                if existing:
                    raise ConflictError("admin email or username already exists")

                session.add(User(
                    username=credentials.username,
                    email=credentials.email,
                    password_hash=hash_password(credentials.password),
                    role=ADMIN_ROLE,
                    status=ACTIVE_STATUS
                ))
                session.flush()
            return True
        except IntegrityError as e:
            raise ConflictError("admin email or username already exists") from e
        except SQLAlchemyError as e:
            logger.error(f"❌ Error creando la cuenta de administrador: {e}")
            raise StorageError(f"failed to create admin account: {e}") from e

    def create_rss_sources_if_absent(self, sources: List[Dict[str, Any]]) -> int:
        try:
            with session_scope(self._session_factory) as session:
                rss_count = session.query(func.count(RSSSource.id)).scalar() or 0
                if rss_count > 0:
                    logger.info("ℹ️ Ya existen fuentes RSS, se omite la creación")
                    return 0

                for source in sources:
                    session.add(RSSSource(**source))
                    logger.info(f"📡 Fuente RSS por defecto creada: {source['name']}")
                session.flush()
            return len(sources)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error creando las fuentes RSS por defecto: {e}")
            raise StorageError(f"failed to create default RSS sources: {e}") from e
