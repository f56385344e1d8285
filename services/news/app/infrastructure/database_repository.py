"""
Repositorio de base de datos para noticias.
Implementación concreta de la interfaz NewsRepository.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from services.news.app.domain.interfaces import NewsRepository
from services.news.app.domain.entities import (
    CounterType, News, NewsStatus, Page, SourceType, calculate_hotness
)
from services.news.app.domain.exceptions import IdentityLookupError, NothingUpdatedError, StorageError
from shared.database.models import BulkImportLock, Noticia as NoticiaModel
from shared.database.models.base import utcnow
from shared.database.session import SessionLocal, session_scope
from shared.services.logging_config import get_logger


logger = get_logger(__name__)

# Campos que se pueden editar mediante update_fields
EDITABLE_FIELDS = {
    'title', 'content', 'summary', 'description', 'source', 'category',
    'published_at', 'is_active', 'link', 'guid', 'author', 'image_url',
    'tags', 'language', 'status', 'is_processed'
}


def model_to_entity(model: NoticiaModel) -> News:
    """Convierte un modelo de base de datos a una entidad del dominio."""
    return News(
        id=model.id,  # type: ignore
        title=model.title,  # type: ignore
        published_at=model.published_at,  # type: ignore
        content=model.content or "",  # type: ignore
        summary=model.summary or "",  # type: ignore
        description=model.description or "",  # type: ignore
        source=model.source or "",  # type: ignore
        category=model.category or "",  # type: ignore
        created_by=model.created_by,  # type: ignore
        is_active=bool(model.is_active),
        source_type=SourceType.from_tag(model.source_type),  # type: ignore
        rss_source_id=model.rss_source_id,  # type: ignore
        link=model.link or "",  # type: ignore
        guid=model.guid or "",  # type: ignore
        author=model.author or "",  # type: ignore
        image_url=model.image_url or "",  # type: ignore
        tags=model.tags or "",  # type: ignore
        language=model.language or "",  # type: ignore
        view_count=model.view_count or 0,  # type: ignore
        like_count=model.like_count or 0,  # type: ignore
        comment_count=model.comment_count or 0,  # type: ignore
        share_count=model.share_count or 0,  # type: ignore
        hotness_score=model.hotness_score or 0.0,  # type: ignore
        status=model.status,  # type: ignore
        is_processed=bool(model.is_processed),
        event_id=model.event_id  # type: ignore
    )


def entity_to_model(entity: News) -> NoticiaModel:
    """Convierte una entidad del dominio a un modelo de base de datos."""
    return NoticiaModel(
        title=entity.title,
        content=entity.content,
        summary=entity.summary,
        description=entity.description,
        source=entity.source,
        category=entity.category,
        published_at=entity.published_at,
        created_by=entity.created_by,
        is_active=entity.is_active,
        source_type=entity.source_type.value,
        rss_source_id=entity.rss_source_id,
        link=entity.link,
        guid=entity.guid,
        author=entity.author,
        image_url=entity.image_url,
        tags=entity.tags,
        language=entity.language,
        view_count=entity.view_count,
        like_count=entity.like_count,
        comment_count=entity.comment_count,
        share_count=entity.share_count,
        hotness_score=entity.hotness_score,
        status=entity.status,
        is_processed=entity.is_processed,
        event_id=entity.event_id
    )


def identity_filter(guid: str, link: str):
    """
    Condición OR sobre las señales de identidad no vacías.
    Retorna None si ambas están vacías.
    """
    conditions = []
    if guid:
        conditions.append(NoticiaModel.guid == guid)
    if link:
        conditions.append(NoticiaModel.link == link)
    if not conditions:
        return None
    return or_(*conditions)


def escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlAlchemyNewsRepository(NewsRepository):
    """
    Implementación del repositorio de noticias usando SQLAlchemy.
    Cada operación abre su propia sesión y transacción.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def _visible(self, session: Session) -> Query:
        """Noticias no borradas lógicamente."""
        return session.query(NoticiaModel).filter(NoticiaModel.status != NewsStatus.DELETED.value)

    def _paginate(self, query: Query, page: int, size: int) -> Page[News]:
        total = query.order_by(None).count()
        models = query.order_by(
            NoticiaModel.published_at.desc(),
            NoticiaModel.id.desc()
        ).offset((page - 1) * size).limit(size).all()
        return Page(items=[model_to_entity(m) for m in models], total=total, page=page, size=size)

    def find_by_guid_or_link(self, guid: str, link: str) -> Optional[News]:
        """
        Busca una noticia cuyo GUID o enlace coincida.
        Basta con una de las dos señales para considerarla existente.
        """
        condition = identity_filter(guid, link)
        if condition is None:
            return None

        try:
            with session_scope(self._session_factory) as session:
                model = session.query(NoticiaModel).filter(condition).order_by(NoticiaModel.id).first()
                if model:
                    return model_to_entity(model)
                return None
        except SQLAlchemyError as e:
            raise IdentityLookupError(f"failed to look up existing news: {e}") from e

    def claim_bulk_import(self, name: str) -> bool:
        """
        Comprueba que no hay noticias y registra el cerrojo en la misma transacción.
        Si otro proceso ya registró el cerrojo, la inserción viola la clave primaria.
        """
        try:
            with session_scope(self._session_factory) as session:
                count = session.query(func.count(NoticiaModel.id)).scalar() or 0
                if count > 0:
                    logger.info(f"ℹ️ La base de datos ya contiene {count} noticias, se omite la importación")
                    return False

                session.add(BulkImportLock(name=name))
                session.flush()
            return True
        except IntegrityError:
            logger.warning(f"⚠️ Importación '{name}' ya en curso en otro proceso, se omite")
            return False
        except SQLAlchemyError as e:
            logger.error(f"❌ Error reservando la importación masiva: {e}")
            raise StorageError(f"failed to check existing news count: {e}") from e

    def release_bulk_import(self, name: str) -> None:
        try:
            with session_scope(self._session_factory) as session:
                session.query(BulkImportLock).filter(BulkImportLock.name == name).delete()
        except SQLAlchemyError as e:
            logger.error(f"❌ Error liberando el cerrojo de importación '{name}': {e}")
            raise StorageError(f"failed to release bulk import lock: {e}") from e

    def update_event_association(self, news_ids: Sequence[int], event_id: Optional[int]) -> int:
        """
        Un único UPDATE sobre las noticias indicadas.
        Si ninguna fila coincide se hace rollback y se lanza NothingUpdatedError.
        """
        try:
            with session_scope(self._session_factory) as session:
                updated = session.query(NoticiaModel).filter(
                    NoticiaModel.id.in_(list(news_ids))
                ).update(
                    {NoticiaModel.event_id: event_id, NoticiaModel.updated_at: utcnow()},
                    synchronize_session=False
                )
                if updated == 0:
                    raise NothingUpdatedError()
                return updated
        except SQLAlchemyError as e:
            logger.error(f"❌ Error actualizando la asociación de eventos: {e}")
            raise StorageError(f"failed to update news event association: {e}") from e

    def save(self, news: News) -> News:
        """
        Guarda una noticia en la base de datos.

        Args:
            news: Entidad de noticia a guardar

        Returns:
            Noticia guardada con ID asignado
        """
        try:
            with session_scope(self._session_factory) as session:
                model = entity_to_model(news)
                session.add(model)
                session.flush()
                news.id = model.id  # type: ignore
            return news
        except SQLAlchemyError as e:
            logger.error(f"❌ Error guardando noticia: {e}")
            raise StorageError(f"failed to create news: {e}") from e

    def get_by_id(self, news_id: int) -> Optional[News]:
        try:
            with session_scope(self._session_factory) as session:
                model = self._visible(session).filter(NoticiaModel.id == news_id).first()
                return model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"❌ Error obteniendo noticia {news_id}: {e}")
            raise StorageError(f"failed to get news: {e}") from e

    def update_fields(self, news_id: int, fields: Dict[str, Any]) -> Optional[News]:
        try:
            with session_scope(self._session_factory) as session:
                model = self._visible(session).filter(NoticiaModel.id == news_id).first()
                if not model:
                    return None

                for name, value in fields.items():
                    if name not in EDITABLE_FIELDS:
                        raise ValueError(f"Campo no editable: {name}")
                    setattr(model, name, value)

                session.flush()
                return model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error actualizando noticia {news_id}: {e}")
            raise StorageError(f"failed to update news: {e}") from e

    def soft_delete(self, news_id: int) -> bool:
        try:
            with session_scope(self._session_factory) as session:
                updated = self._visible(session).filter(NoticiaModel.id == news_id).update(
                    {
                        NoticiaModel.status: NewsStatus.DELETED.value,
                        NoticiaModel.is_active: False,
                        NoticiaModel.updated_at: utcnow()
                    },
                    synchronize_session=False
                )
                return updated > 0
        except SQLAlchemyError as e:
            logger.error(f"❌ Error borrando noticia {news_id}: {e}")
            raise StorageError(f"failed to delete news: {e}") from e

    def hard_delete(self, news_id: int) -> bool:
        try:
            with session_scope(self._session_factory) as session:
                deleted = session.query(NoticiaModel).filter(NoticiaModel.id == news_id).delete(
                    synchronize_session=False
                )
                return deleted > 0
        except SQLAlchemyError as e:
            logger.error(f"❌ Error eliminando noticia {news_id}: {e}")
            raise StorageError(f"failed to delete news: {e}") from e

    def increment_counter(self, news_id: int, counter: CounterType, amount: int) -> Optional[News]:
        """
        Incrementa un contador bajo bloqueo de fila y recalcula hotness_score.
        """
        try:
            with session_scope(self._session_factory) as session:
                model = self._visible(session).filter(
                    NoticiaModel.id == news_id
                ).with_for_update().first()
                if not model:
                    return None

                column = counter.column
                setattr(model, column, (getattr(model, column) or 0) + amount)
                entity = model_to_entity(model)
                model.hotness_score = calculate_hotness(entity, utcnow())  # type: ignore
                session.flush()
                return model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error incrementando {counter.column} de la noticia {news_id}: {e}")
            raise StorageError(f"failed to increment counter: {e}") from e

    def list_recent(self, page: int, size: int) -> Page[News]:
        try:
            with session_scope(self._session_factory) as session:
                return self._paginate(self._visible(session), page, size)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error listando noticias: {e}")
            raise StorageError(f"failed to list news: {e}") from e

    def list_hot(self, limit: int) -> List[News]:
        """Noticias por popularidad descendente; empates resueltos por ID."""
        try:
            with session_scope(self._session_factory) as session:
                models = self._visible(session).order_by(
                    NoticiaModel.hotness_score.desc(),
                    NoticiaModel.id.asc()
                ).limit(limit).all()
                return [model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            logger.error(f"❌ Error obteniendo noticias populares: {e}")
            raise StorageError(f"failed to get hot news: {e}") from e

    def search(self, text: str, page: int, size: int) -> Page[News]:
        pattern = f"%{escape_like(text)}%"
        try:
            with session_scope(self._session_factory) as session:
                query = self._visible(session).filter(or_(
                    NoticiaModel.title.ilike(pattern, escape="\\"),
                    NoticiaModel.content.ilike(pattern, escape="\\"),
                    NoticiaModel.summary.ilike(pattern, escape="\\"),
                    NoticiaModel.description.ilike(pattern, escape="\\"),
                    NoticiaModel.tags.ilike(pattern, escape="\\")
                ))
                return self._paginate(query, page, size)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error buscando noticias: {e}")
            raise StorageError(f"failed to search news: {e}") from e

    def list_by_category(self, category: str, page: int, size: int) -> Page[News]:
        try:
            with session_scope(self._session_factory) as session:
                query = self._visible(session).filter(NoticiaModel.category == category)
                return self._paginate(query, page, size)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error listando noticias de la categoría {category}: {e}")
            raise StorageError(f"failed to list news by category: {e}") from e

    def list_by_title(self, title: str) -> List[News]:
        pattern = f"%{escape_like(title)}%"
        try:
            with session_scope(self._session_factory) as session:
                models = self._visible(session).filter(
                    NoticiaModel.title.ilike(pattern, escape="\\")
                ).order_by(NoticiaModel.published_at.desc(), NoticiaModel.id.desc()).all()
                return [model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            logger.error(f"❌ Error buscando noticias por título: {e}")
            raise StorageError(f"failed to get news by title: {e}") from e

    def list_by_event(self, event_id: int) -> List[News]:
        try:
            with session_scope(self._session_factory) as session:
                models = self._visible(session).filter(
                    NoticiaModel.event_id == event_id
                ).order_by(NoticiaModel.published_at.desc(), NoticiaModel.id.desc()).all()
                return [model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            logger.error(f"❌ Error obteniendo noticias del evento {event_id}: {e}")
            raise StorageError(f"failed to get news by event: {e}") from e

    def list_unlinked(self, page: int, size: int) -> Page[News]:
        try:
            with session_scope(self._session_factory) as session:
                query = self._visible(session).filter(NoticiaModel.event_id.is_(None))
                return self._paginate(query, page, size)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error listando noticias sin evento: {e}")
            raise StorageError(f"failed to get unlinked news: {e}") from e
