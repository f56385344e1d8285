"""
Interfaces del dominio (puertos) que definen contratos para las dependencias externas.
Estas interfaces están implementadas en la capa de infraestructura.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence
from .entities import (
    AdminCredentials, BulkReadResult, CounterType, News, Page
)


class NewsRepository(ABC):
    """
    Puerto para el repositorio de noticias.
    Define las operaciones de persistencia y consulta necesarias.
    """

    @abstractmethod
    def find_by_guid_or_link(self, guid: str, link: str) -> Optional[News]:
        """Busca una noticia cuyo GUID o enlace coincida con los indicados."""
        pass

    @abstractmethod
    def claim_bulk_import(self, name: str) -> bool:
        """
        Reserva una importación masiva si la base de datos no tiene noticias.
        Retorna False si ya hay noticias o si otra importación está en curso.
        """
        pass

    @abstractmethod
    def release_bulk_import(self, name: str) -> None:
        """Libera la reserva de una importación masiva."""
        pass

    @abstractmethod
    def update_event_association(self, news_ids: Sequence[int], event_id: Optional[int]) -> int:
        """Asigna (o elimina) el evento de todas las noticias indicadas. Retorna filas afectadas."""
        pass

    @abstractmethod
    def save(self, news: News) -> News:
        """Guarda una noticia nueva."""
        pass

    @abstractmethod
    def get_by_id(self, news_id: int) -> Optional[News]:
        """Obtiene una noticia no borrada por su ID."""
        pass

    @abstractmethod
    def update_fields(self, news_id: int, fields: Dict[str, Any]) -> Optional[News]:
        """Actualiza campos editables de una noticia."""
        pass

    @abstractmethod
    def soft_delete(self, news_id: int) -> bool:
        """Borrado lógico. Retorna False si no existe o ya estaba borrada."""
        pass

    @abstractmethod
    def hard_delete(self, news_id: int) -> bool:
        """Elimina físicamente la fila."""
        pass

    @abstractmethod
    def increment_counter(self, news_id: int, counter: CounterType, amount: int) -> Optional[News]:
        """Incrementa un contador de interacción y recalcula la popularidad."""
        pass

    @abstractmethod
    def list_recent(self, page: int, size: int) -> Page[News]:
        pass

    @abstractmethod
    def list_hot(self, limit: int) -> List[News]:
        pass

    @abstractmethod
    def search(self, text: str, page: int, size: int) -> Page[News]:
        pass

    @abstractmethod
    def list_by_category(self, category: str, page: int, size: int) -> Page[News]:
        pass

    @abstractmethod
    def list_by_title(self, title: str) -> List[News]:
        pass

    @abstractmethod
    def list_by_event(self, event_id: int) -> List[News]:
        pass

    @abstractmethod
    def list_unlinked(self, page: int, size: int) -> Page[News]:
        pass


class BatchWriter(ABC):
    """
    Puerto para la escritura por lotes.
    Toda la lista se persiste de forma atómica.
    """

    @abstractmethod
    def write(self, news_list: List[News]) -> List[News]:
        pass


class BulkNewsSource(ABC):
    """
    Puerto para las fuentes de carga masiva.
    Entrega las noticias candidatas ya parseadas en el orden del origen.
    """

    @abstractmethod
    def read(self, location: str) -> BulkReadResult:
        pass


class BootstrapRepository(ABC):
    """
    Puerto para los datos iniciales (administrador y fuentes RSS por defecto).
    """

    @abstractmethod
    def create_admin_if_absent(self, credentials: AdminCredentials,
                               validate: Callable[[AdminCredentials], None]) -> bool:
        """
        Crea el administrador si no existe ninguno. Retorna True si lo creó.
        validate se ejecuta dentro de la transacción, tras comprobar que no hay administrador.
        """
        pass

    @abstractmethod
    def create_rss_sources_if_absent(self, sources: List[Dict[str, Any]]) -> int:
        """Crea las fuentes indicadas si no existe ninguna. Retorna cuántas creó."""
        pass
