"""
Endpoints API del servicio de noticias.
Capa fina: traduce peticiones HTTP a casos de uso y envuelve las respuestas.
"""
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from services.news.api.schemas import (
    EventAssociationRequest, NewsCreateRequest, NewsUpdateRequest,
    news_to_response, success, success_with_pagination
)
from services.news.app.application.event_association_use_case import EventAssociationUseCase
from services.news.app.application.import_bulk_news_use_case import ImportBulkNewsUseCase
from services.news.app.application.manage_news_use_case import ManageNewsUseCase, NewsDraft
from services.news.app.application.news_query_use_case import NewsQueryUseCase
from services.news.app.application.seed_data_use_case import SeedAllDataUseCase, SeedDefaultDataUseCase
from services.news.app.domain.entities import CounterType
from services.news.app.infrastructure.batch_writer import SqlAlchemyBatchWriter
from services.news.app.infrastructure.bootstrap_repository import SqlAlchemyBootstrapRepository
from services.news.app.infrastructure.database_repository import SqlAlchemyNewsRepository
from services.news.app.infrastructure.json_bulk_source import JsonBulkNewsSource
from shared.config.settings import settings
from shared.database.session import SessionLocal
from shared.services.logging_config import get_logger

logger = get_logger(__name__)

news_router = APIRouter(prefix="/news", tags=["News"])


# --- Dependencias ---
def get_session_factory() -> Callable[[], Session]:
    return SessionLocal

def get_news_repository(session_factory=Depends(get_session_factory)) -> SqlAlchemyNewsRepository:
    return SqlAlchemyNewsRepository(session_factory)

def get_query_use_case(repository=Depends(get_news_repository)) -> NewsQueryUseCase:
    return NewsQueryUseCase(repository)

def get_manage_use_case(repository=Depends(get_news_repository)) -> ManageNewsUseCase:
    return ManageNewsUseCase(repository)

def get_association_use_case(repository=Depends(get_news_repository)) -> EventAssociationUseCase:
    return EventAssociationUseCase(repository)

def get_seed_all_use_case(session_factory=Depends(get_session_factory),
                          repository=Depends(get_news_repository)) -> SeedAllDataUseCase:
    import_use_case = ImportBulkNewsUseCase(
        bulk_source=JsonBulkNewsSource(),
        news_repository=repository,
        batch_writer=SqlAlchemyBatchWriter(session_factory)
    )
    return SeedAllDataUseCase(import_use_case)

def get_seed_default_use_case(session_factory=Depends(get_session_factory)) -> SeedDefaultDataUseCase:
    return SeedDefaultDataUseCase(SqlAlchemyBootstrapRepository(session_factory))


# --- Lecturas públicas ---
@news_router.get("")
def get_all_news(page: Optional[str] = None, size: Optional[str] = None,
                 use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success_with_pagination(use_case.list_news(page, size))

@news_router.get("/search")
def search_news(query: str = "", page: Optional[str] = None, size: Optional[str] = None,
                use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success_with_pagination(use_case.search(query, page, size))

@news_router.get("/hot")
def get_hot_news(limit: Optional[str] = None, use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success([news_to_response(news) for news in use_case.hot_news(limit)])

@news_router.get("/title")
def get_news_by_title(title: str = "", use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success([news_to_response(news) for news in use_case.by_title(title)])

@news_router.get("/category/{category}")
def get_news_by_category(category: str, page: Optional[str] = None, size: Optional[str] = None,
                         use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success_with_pagination(use_case.by_category(category, page, size))

@news_router.get("/unlinked")
def get_unlinked_news(page: Optional[str] = None, size: Optional[str] = None,
                      use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success_with_pagination(use_case.unlinked(page, size))

@news_router.get("/event/{event_id}")
def get_news_by_event_id(event_id: int, use_case: NewsQueryUseCase = Depends(get_query_use_case)):
    return success([news_to_response(news) for news in use_case.by_event_id(event_id)])


# --- Asociación con eventos ---
@news_router.put("/event-association")
def update_news_event_association(request: EventAssociationRequest,
                                  use_case: EventAssociationUseCase = Depends(get_association_use_case)):
    updated = use_case.reassociate_by_ids(request.news_ids, request.event_id)
    message = "News event association updated successfully"
    if request.event_id is None:
        message = "News event association removed successfully"
    return success({"message": message, "updated": updated})


# --- Administración: carga de datos iniciales ---
@news_router.post("/admin/import")
def trigger_bulk_import(use_case: SeedAllDataUseCase = Depends(get_seed_all_use_case)):
    """
    Dispara manualmente la importación masiva del fichero configurado (NEWS_SEED_FILE).
    Sin noticias previas importa el fichero; si ya hay noticias no hace nada.
    """
    logger.info("🚀 Disparando la importación masiva...")
    result = use_case.execute(settings.NEWS_SEED_FILE)
    return success({
        "imported": result.imported,
        "skipped": result.skipped,
        "errors": result.errors,
        "skipped_entirely": result.skipped_entirely,
        "message": result.message
    })

@news_router.post("/admin/seed")
def trigger_default_seed(use_case: SeedDefaultDataUseCase = Depends(get_seed_default_use_case)):
    admin_created = use_case.seed_initial_admin()
    rss_sources_created = use_case.seed_rss_sources()
    return success({"admin_created": admin_created, "rss_sources_created": rss_sources_created})


# --- Gestión individual ---
@news_router.post("")
def create_news(request: NewsCreateRequest, x_user_id: Optional[int] = Header(default=None),
                use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    news = use_case.create_news(NewsDraft(**request.model_dump()), creator_id=x_user_id)
    return success(news_to_response(news))

@news_router.get("/{news_id}")
def get_news_by_id(news_id: int, use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    return success(news_to_response(use_case.get_news(news_id)))

@news_router.put("/{news_id}")
def update_news(news_id: int, request: NewsUpdateRequest,
                use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    news = use_case.update_news(news_id, request.model_dump(exclude_unset=True))
    return success(news_to_response(news))

@news_router.delete("/{news_id}")
def delete_news(news_id: int, use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    use_case.delete_news(news_id)
    return success({"message": "News deleted successfully"})

@news_router.delete("/admin/{news_id}")
def hard_delete_news(news_id: int, use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    use_case.hard_delete_news(news_id)
    return success({"message": "News permanently deleted"})

@news_router.post("/{news_id}/view")
def register_view(news_id: int, use_case: ManageNewsUseCase = Depends(get_manage_use_case)):
    news = use_case.increment_counter(news_id, CounterType.VIEW)
    return success({"view_count": news.view_count, "hotness_score": news.hotness_score})
