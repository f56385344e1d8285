"""
Entidades de dominio para el servicio de noticias.
Representan los conceptos centrales del negocio sin dependencias externas.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from enum import Enum
import math


class SourceType(str, Enum):
    """Origen de una noticia."""
    MANUAL = "manual"
    RSS = "rss"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "SourceType":
        """
        Convierte la etiqueta textual del origen en su variante.
        Solo "rss" se reconoce como RSS; cualquier otro valor es MANUAL.
        """
        if tag == cls.RSS.value:
            return cls.RSS
        # Rama por defecto explícita: etiquetas desconocidas se tratan como manuales
        return cls.MANUAL


class NewsStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    DELETED = "deleted"


class CounterType(str, Enum):
    """Contadores de interacción de una noticia."""
    VIEW = "view"
    LIKE = "like"
    COMMENT = "comment"
    SHARE = "share"

    @property
    def column(self) -> str:
        return f"{self.value}_count"


@dataclass
class News:
    """
    Entidad principal que representa una noticia.
    """
    id: Optional[int]
    title: str
    published_at: datetime
    content: str = ""
    summary: str = ""
    description: str = ""
    source: str = ""
    category: str = ""
    created_by: Optional[int] = None
    is_active: bool = True
    source_type: SourceType = SourceType.MANUAL
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
    status: str = NewsStatus.PUBLISHED.value
    is_processed: bool = False
    event_id: Optional[int] = None

    def __post_init__(self):
        """Validaciones de dominio."""
        for counter in CounterType:
            if getattr(self, counter.column) < 0:
                raise ValueError(f"El contador {counter.column} no puede ser negativo")

    def identity_keys(self) -> List[str]:
        """Señales de identidad no vacías (GUID y enlace)."""
        keys = []
        if self.guid:
            keys.append(f"guid:{self.guid}")
        if self.link:
            keys.append(f"link:{self.link}")
        return keys


class ResolutionStatus(str, Enum):
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    LOOKUP_ERROR = "lookup_error"


@dataclass
class IdentityResolution:
    """
    Resultado de comprobar si una noticia candidata ya existe.
    """
    status: ResolutionStatus
    existing: Optional[News] = None
    error: Optional[str] = None

    @property
    def is_duplicate(self) -> bool:
        return self.status == ResolutionStatus.DUPLICATE

    @property
    def is_new(self) -> bool:
        return self.status == ResolutionStatus.NOT_FOUND


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """Porción paginada de un listado junto con el total de coincidencias."""
    items: List[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)


@dataclass
class AdminCredentials:
    """Datos de la cuenta de administrador inicial."""
    email: str
    username: str
    password: str = field(repr=False)


# Pesos de cada interacción para la puntuación de popularidad
HOTNESS_WEIGHTS = {
    CounterType.VIEW: 1.0,
    CounterType.LIKE: 3.0,
    CounterType.COMMENT: 5.0,
    CounterType.SHARE: 8.0,
}
HOTNESS_GRAVITY = 1.5


def calculate_hotness(news: News, now: datetime) -> float:
    """
    Calcula la puntuación de popularidad a partir de los contadores y la antigüedad.
    Las interacciones ponderadas se atenúan con la edad en horas.
    """
    interactions = sum(getattr(news, counter.column) * weight for counter, weight in HOTNESS_WEIGHTS.items())
    age_hours = max((now - news.published_at).total_seconds() / 3600.0, 0.0)
    return round(interactions / math.pow(age_hours + 2.0, HOTNESS_GRAVITY), 6)


@dataclass
class NewsCandidate:
    """
    Noticia leída de una fuente externa, aún sin deduplicar ni persistir.
    La fecha de publicación llega como texto "YYYY-MM-DD HH:MM:SS".
    """
    title: str
    published_at: str = ""
    content: str = ""
    summary: str = ""
    description: str = ""
    source: str = ""
    category: str = ""
    created_by: Optional[int] = None
    is_active: bool = True
    source_type: str = SourceType.MANUAL.value
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
    status: str = NewsStatus.PUBLISHED.value
    is_processed: bool = False


@dataclass
class BulkReadResult:
    """Candidatas válidas de un fichero masivo y número de elementos rechazados."""
    candidates: List[NewsCandidate]
    rejected: int = 0
