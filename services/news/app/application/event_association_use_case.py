"""
Caso de uso para asociar noticias a eventos en bloque.
"""
from typing import Iterable, Optional

from services.news.app.domain.exceptions import EmptyIdListError
from services.news.app.domain.interfaces import NewsRepository
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


class EventAssociationUseCase:
    """
    Asigna un conjunto de noticias a un evento, o elimina su asociación,
    en una única operación atómica.
    """

    def __init__(self, news_repository: NewsRepository):
        self.news_repository = news_repository

    def reassociate_by_ids(self, news_ids: Iterable[int], event_id: Optional[int]) -> int:
        """
        Args:
            news_ids: IDs de las noticias a actualizar
            event_id: ID del evento, o None para desasociar

        Returns:
            Número de noticias actualizadas

        Raises:
            EmptyIdListError: si no se indica ningún ID
            NothingUpdatedError: si ningún ID corresponde a una noticia
            StorageError: si falla la transacción
        """
        unique_ids = list(dict.fromkeys(news_ids))
        if not unique_ids:
            raise EmptyIdListError()

        updated = self.news_repository.update_event_association(unique_ids, event_id)

        if event_id is None:
            logger.info(f"🔗 Asociación eliminada en {updated} de {len(unique_ids)} noticias")
        else:
            logger.info(f"🔗 {updated} de {len(unique_ids)} noticias asociadas al evento {event_id}")
        return updated
