"""
Modelo para noticias importadas (carga masiva, RSS) o creadas manualmente.
Cada noticia puede estar asociada opcionalmente a un evento externo.
"""
from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime
from .base import Base, utcnow


class Noticia(Base):
    """
    Modelo para almacenar noticias y su asociación con eventos.
    La identidad de una noticia se decide por su GUID o por su enlace.
    """
    __tablename__ = "noticias"

    id = Column(Integer, primary_key=True, index=True)

    # Contenido
    title = Column(String(500), nullable=False, index=True)
    content = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    source = Column(String(255), nullable=True)
    category = Column(String(100), nullable=True, index=True)
    published_at = Column(DateTime, nullable=False, index=True)
    created_by = Column(Integer, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Origen: 'manual' o 'rss'
    source_type = Column(String(20), default="manual", nullable=False)
    rss_source_id = Column(Integer, nullable=True)

    # Señales de identidad para deduplicación
    link = Column(String(1000), nullable=True, index=True)
    guid = Column(String(500), nullable=True, index=True)

    author = Column(String(255), nullable=True)
    image_url = Column(String(1000), nullable=True)
    tags = Column(Text, nullable=True)  # Lista serializada
    language = Column(String(10), nullable=True)

    # Contadores de interacción (nunca decrecen)
    view_count = Column(Integer, default=0, nullable=False)
    like_count = Column(Integer, default=0, nullable=False)
    comment_count = Column(Integer, default=0, nullable=False)
    share_count = Column(Integer, default=0, nullable=False)
    hotness_score = Column(Float, default=0.0, nullable=False, index=True)

    status = Column(String(20), default="published", nullable=False)
    is_processed = Column(Boolean, default=False, nullable=False)

    # Asociación a evento externo (NULL = sin asociar)
    event_id = Column(Integer, nullable=True, index=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

