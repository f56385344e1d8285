"""
Sesión de base de datos compartida.
Proporciona el engine, la fábrica de sesiones y los context managers
transaccionales que usan los repositorios.
"""
import logging
from contextlib import contextmanager
from typing import Callable, Iterator
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.exc import DisconnectionError
from shared.config.settings import settings

logger = logging.getLogger(__name__)

def create_engine_with_ssl_config(database_url: str = settings.DATABASE_URL) -> Engine:
    """
    Crea un engine de SQLAlchemy con configuración SSL optimizada para PostgreSQL.
    """
    if database_url.startswith("sqlite"):
        # Configuración específica para SQLite
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
            pool_recycle=3600
        )

    connect_args = {}

    # Configuración SSL para PostgreSQL
    if "postgresql" in database_url.lower():
        connect_args.update({
            "sslmode": "require",  # Requerir SSL
            "connect_timeout": 10,  # Timeout de conexión
            "application_name": "newsdesk",  # Identificador de aplicación
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        })

    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_recycle=1800,  # Reciclar conexiones cada 30 minutos
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_timeout=30,
        connect_args=connect_args,
        echo=False
    )

# Crear el engine con configuración optimizada
engine = create_engine_with_ssl_config()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configurar SQLite para mejor rendimiento."""
    if settings.DATABASE_URL.startswith("sqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA cache_size=10000")
        cursor.execute("PRAGMA temp_store=MEMORY")
        cursor.close()

@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_connection, connection_record, connection_proxy):
    """Verificar conexión al obtener del pool."""
    try:
        cursor = dbapi_connection.cursor()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        cursor.close()
    except Exception as e:
        logger.warning(f"⚠️ Conexión corrupta detectada, será reciclada: {e}")
        raise DisconnectionError("Conexión corrupta detectada")

def init_database(bind: Engine = engine):
    """
    Inicializa la base de datos creando todas las tablas definidas en los modelos.
    Esta función debe ser llamada al iniciar el servicio para asegurar que las tablas existan.
    """
    try:
        from shared.database.models import Base
        Base.metadata.create_all(bind=bind)
        logger.info("✅ Base de datos inicializada correctamente")
    except Exception as e:
        logger.error(f"❌ Error inicializando base de datos: {e}")
        raise

@contextmanager
def session_scope(session_factory: Callable[[], Session] = SessionLocal) -> Iterator[Session]:
    """
    Context manager transaccional: commit al salir, rollback ante cualquier error.
    Todo lo ejecutado dentro del bloque es atómico.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

def health_check(session_factory: Callable[[], Session] = SessionLocal) -> bool:
    """
    Verifica la salud de la conexión a la base de datos.

    Returns:
        bool: True si la conexión está saludable, False en caso contrario
    """
    try:
        with session_scope(session_factory) as db:
            db.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"❌ Health check falló: {e}")
        return False
