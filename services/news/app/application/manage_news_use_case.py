"""
Caso de uso para la gestión individual de noticias:
creación, consulta, edición, borrado y contadores de interacción.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from services.news.app.domain.entities import CounterType, News, NewsStatus, SourceType
from services.news.app.domain.exceptions import ConflictError, NewsNotFoundError, ValidationError
from services.news.app.domain.interfaces import NewsRepository
from shared.database.models.base import utcnow
from shared.services.logging_config import get_logger


logger = get_logger(__name__)

# El estado "deleted" solo lo asigna delete_news
EDITABLE_STATUSES = {
    NewsStatus.DRAFT.value,
    NewsStatus.PUBLISHED.value,
    NewsStatus.ARCHIVED.value
}


@dataclass
class NewsDraft:
    """Datos de una noticia creada manualmente."""
    title: str
    content: str = ""
    summary: str = ""
    description: str = ""
    source: str = ""
    category: str = ""
    published_at: Optional[datetime] = None
    link: str = ""
    guid: str = ""
    author: str = ""
    image_url: str = ""
    tags: str = ""
    language: str = ""


class ManageNewsUseCase:

    def __init__(self, news_repository: NewsRepository):
        self.news_repository = news_repository

    def create_news(self, draft: NewsDraft, creator_id: Optional[int] = None) -> News:
        """
        Crea una noticia manual. Falla con ConflictError si su GUID o su enlace ya existen.
        """
        if not draft.title or not draft.title.strip():
            raise ValidationError("Title is required")

        if draft.guid or draft.link:
            existing = self.news_repository.find_by_guid_or_link(draft.guid, draft.link)
            if existing is not None:
                raise ConflictError("news with the same guid or link already exists")

        news = News(
            id=None,
            title=draft.title.strip(),
            published_at=draft.published_at or utcnow(),
            content=draft.content,
            summary=draft.summary,
            description=draft.description,
            source=draft.source,
            category=draft.category,
            created_by=creator_id,
            source_type=SourceType.MANUAL,
            link=draft.link,
            guid=draft.guid,
            author=draft.author,
            image_url=draft.image_url,
            tags=draft.tags,
            language=draft.language
        )
        saved = self.news_repository.save(news)
        logger.info(f"📰 Nueva noticia creada: {saved.title[:50]} (ID: {saved.id})")
        return saved

    def get_news(self, news_id: int) -> News:
        news = self.news_repository.get_by_id(news_id)
        if news is None:
            raise NewsNotFoundError(news_id)
        return news

    def update_news(self, news_id: int, fields: Dict[str, Any]) -> News:
        """Edición parcial; los campos con valor None se ignoran."""
        changes = {name: value for name, value in fields.items() if value is not None}
        if 'title' in changes and not str(changes['title']).strip():
            raise ValidationError("Title cannot be empty")
        if 'status' in changes and changes['status'] not in EDITABLE_STATUSES:
            raise ValidationError(f"Invalid news status: {changes['status']}")

        if not changes:
            return self.get_news(news_id)

        updated = self.news_repository.update_fields(news_id, changes)
        if updated is None:
            raise NewsNotFoundError(news_id)
        return updated

    def delete_news(self, news_id: int) -> None:
        if not self.news_repository.soft_delete(news_id):
            raise NewsNotFoundError(news_id)
        logger.info(f"🗑️ Noticia {news_id} marcada como borrada")

    def hard_delete_news(self, news_id: int) -> None:
        if not self.news_repository.hard_delete(news_id):
            raise NewsNotFoundError(news_id)
        logger.info(f"🗑️ Noticia {news_id} eliminada definitivamente")

    def increment_counter(self, news_id: int, counter: CounterType, amount: int = 1) -> News:
        """Los contadores solo crecen: amount debe ser al menos 1."""
        if amount < 1:
            raise ValidationError("Counter increment must be positive")

        news = self.news_repository.increment_counter(news_id, counter, amount)
        if news is None:
            raise NewsNotFoundError(news_id)
        return news
