"""
Resolución de identidad de noticias candidatas.
"""
from services.news.app.domain.entities import IdentityResolution, ResolutionStatus
from services.news.app.domain.exceptions import StorageError
from services.news.app.domain.interfaces import NewsRepository
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


class IdentityResolver:
    """
    Decide si una candidata ya está almacenada usando GUID O enlace.
    Cualquiera de las dos señales basta para considerarla duplicada.
    """

    def __init__(self, news_repository: NewsRepository):
        self.news_repository = news_repository

    def resolve(self, guid: str, link: str) -> IdentityResolution:
        """
        Args:
            guid: Identificador global de la candidata
            link: Enlace canónico de la candidata

        Returns:
            IdentityResolution con DUPLICATE (y la noticia existente),
            NOT_FOUND o LOOKUP_ERROR
        """
        try:
            existing = self.news_repository.find_by_guid_or_link(guid, link)
        except StorageError as e:
            logger.error(f"❌ Error comprobando duplicados (guid={guid!r}, link={link!r}): {e}")
            return IdentityResolution(status=ResolutionStatus.LOOKUP_ERROR, error=str(e))

        if existing is not None:
            return IdentityResolution(status=ResolutionStatus.DUPLICATE, existing=existing)
        return IdentityResolution(status=ResolutionStatus.NOT_FOUND)
