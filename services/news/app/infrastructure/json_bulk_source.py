"""
Adaptador de infraestructura para ficheros JSON de carga masiva.
Implementa la interfaz BulkNewsSource.

Formato esperado:
    {"news_items": [{"title": ..., "published_at": "2024-01-01 12:00:00", ...}, ...]}
"""
import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, field_validator

from services.news.app.config import BULK_NEWS_ITEMS_FIELD
from services.news.app.domain.entities import BulkReadResult, NewsCandidate
from services.news.app.domain.exceptions import BulkSourceError
from services.news.app.domain.interfaces import BulkNewsSource
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


class BulkNewsItem(BaseModel):
    """Esquema de cada noticia del fichero masivo."""
    model_config = ConfigDict(extra='ignore')

    title: str
    content: str = ""
    summary: str = ""
    description: str = ""
    source: str = ""
    category: str = ""
    published_at: str = ""
    created_by: Optional[int] = None
    is_active: bool = True
    source_type: str = "manual"
    rss_source_id: Optional[int] = None
    link: str = ""
    guid: str = ""
    author: str = ""
    image_url: str = ""
    tags: str = ""
    language: str = ""
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    share_count: int = 0
    hotness_score: float = 0.0
    status: str = "published"
    is_processed: bool = False

    @field_validator(
        'content', 'summary', 'description', 'source', 'category',
        'source_type', 'link', 'guid', 'author', 'image_url', 'tags', 'language',
        mode='before'
    )
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator('published_at', mode='before')
    @classmethod
    def published_at_as_text(cls, value):
        # Una fecha que no es texto no descarta la noticia: se usará la hora actual
        return value if isinstance(value, str) else ""

    @field_validator('status', mode='before')
    @classmethod
    def default_status(cls, value):
        return value or "published"

    @field_validator('view_count', 'like_count', 'comment_count', 'share_count')
    @classmethod
    def non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("los contadores no pueden ser negativos")
        return value

    def to_candidate(self) -> NewsCandidate:
        return NewsCandidate(**self.model_dump())


class JsonBulkNewsSource(BulkNewsSource):
    """
    Lee noticias candidatas de un fichero JSON.
    Los elementos que no cumplen el esquema se descartan y se cuentan.
    """

    def read(self, location: str) -> BulkReadResult:
        path = Path(location)
        try:
            raw = path.read_text(encoding='utf-8')
        except OSError as e:
            raise BulkSourceError(f"failed to read JSON file: {e}") from e

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise BulkSourceError(f"failed to parse JSON data: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get(BULK_NEWS_ITEMS_FIELD, []), list):
            raise BulkSourceError(f"failed to parse JSON data: '{BULK_NEWS_ITEMS_FIELD}' must be a list")

        items = document.get(BULK_NEWS_ITEMS_FIELD, [])
        candidates = []
        rejected = 0

        for index, item in enumerate(items, start=1):
            try:
                candidates.append(BulkNewsItem.model_validate(item).to_candidate())
            except PydanticValidationError as e:
                rejected += 1
                logger.warning(f"⚠️ Registro {index} descartado por formato inválido: {e.error_count()} errores")

        logger.info(f"📄 Fichero {path.name} leído: {len(candidates)} noticias válidas, {rejected} descartadas")
        return BulkReadResult(candidates=candidates, rejected=rejected)
