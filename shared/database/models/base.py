"""
Base común para todos los modelos de SQLAlchemy.
Define la declarative_base que deben usar todos los modelos.
"""
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

# Base común para todos los modelos del sistema
Base = declarative_base()


def utcnow() -> datetime:
    """Hora actual en UTC sin tzinfo, tal como se guarda en las columnas DateTime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
