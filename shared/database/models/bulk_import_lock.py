"""
Cerrojo de importación masiva.
Una fila por importación en curso; la clave primaria impide que dos
procesos pasen a la vez la comprobación de base de datos vacía.
"""
from sqlalchemy import Column, String, DateTime
from .base import Base, utcnow


class BulkImportLock(Base):
    __tablename__ = "bulk_import_locks"

    name = Column(String(100), primary_key=True)
    started_at = Column(DateTime, default=utcnow, nullable=False)
