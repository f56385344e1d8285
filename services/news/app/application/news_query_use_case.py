"""
Caso de uso de consultas: listados paginados, populares, búsqueda y filtros.
"""
from typing import Any, List, Optional

from services.news.app.application.pagination import normalize_hot_limit, normalize_pagination
from services.news.app.domain.entities import News, Page
from services.news.app.domain.exceptions import EmptyQueryError, ValidationError
from services.news.app.domain.interfaces import NewsRepository


class NewsQueryUseCase:
    """
    Todas las lecturas de noticias. Los parámetros de paginación se sanean
    con la misma política en cada listado.
    """

    def __init__(self, news_repository: NewsRepository):
        self.news_repository = news_repository

    def list_news(self, page: Any = None, size: Any = None) -> Page[News]:
        page, size = normalize_pagination(page, size)
        return self.news_repository.list_recent(page, size)

    def hot_news(self, limit: Any = None) -> List[News]:
        return self.news_repository.list_hot(normalize_hot_limit(limit))

    def search(self, text: Optional[str], page: Any = None, size: Any = None) -> Page[News]:
        if not text or not text.strip():
            raise EmptyQueryError()
        page, size = normalize_pagination(page, size)
        return self.news_repository.search(text.strip(), page, size)

    def by_category(self, category: Optional[str], page: Any = None, size: Any = None) -> Page[News]:
        if not category:
            raise ValidationError("Category is required")
        page, size = normalize_pagination(page, size)
        return self.news_repository.list_by_category(category, page, size)

    def by_title(self, title: Optional[str]) -> List[News]:
        if not title or not title.strip():
            raise ValidationError("Title parameter is required")
        return self.news_repository.list_by_title(title.strip())

    def by_event_id(self, event_id: int) -> List[News]:
        return self.news_repository.list_by_event(event_id)

    def unlinked(self, page: Any = None, size: Any = None) -> Page[News]:
        page, size = normalize_pagination(page, size)
        return self.news_repository.list_unlinked(page, size)
