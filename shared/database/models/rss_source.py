"""
Modelo para las fuentes RSS configuradas.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from .base import Base, utcnow


class RSSSource(Base):
    """
    Fuente RSS de la que se obtienen noticias.
    El nombre y la URL identifican la fuente.
    """
    __tablename__ = "rss_sources"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    url = Column(String(500), nullable=False, unique=True)
    category = Column(String(50), nullable=True)
    language = Column(String(10), default="zh")
    is_active = Column(Boolean, default=True, nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(Integer, default=1)  # Peso de ordenación
    update_freq = Column(Integer, default=60)  # Minutos entre actualizaciones

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
