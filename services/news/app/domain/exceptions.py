"""
Errores del dominio de noticias.
La capa HTTP traduce cada familia a su código de respuesta.
"""


class NewsServiceError(Exception):
    """Error base del servicio de noticias."""


class ValidationError(NewsServiceError):
    """Entrada o configuración inválida. Nunca se reintenta."""


class EmptyQueryError(ValidationError):
    def __init__(self, message: str = "Search query cannot be empty"):
        super().__init__(message)


class EmptyIdListError(ValidationError):
    def __init__(self, message: str = "News IDs cannot be empty"):
        super().__init__(message)


class InvalidCredentialError(ValidationError):
    """Credenciales del administrador con formato inválido."""


class NotFoundError(NewsServiceError):
    """El recurso solicitado no existe."""


class NewsNotFoundError(NotFoundError):
    def __init__(self, news_id=None):
        self.news_id = news_id
        super().__init__("news not found")


class ConflictError(NewsServiceError):
    """El recurso ya existe (GUID/enlace de noticia, email/usuario de admin)."""


class NothingUpdatedError(NewsServiceError):
    """Ninguna noticia coincide con los IDs indicados."""

    def __init__(self, message: str = "No news were updated, check that the news IDs are correct"):
        super().__init__(message)


class StorageError(NewsServiceError):
    """Fallo de persistencia: conexión ausente, consulta o transacción fallida."""


class IdentityLookupError(StorageError):
    pass


class BatchWriteError(StorageError):
    pass


class BulkImportError(StorageError):
    pass


class BulkSourceError(StorageError):
    """El fichero de carga masiva no se puede leer o no tiene el formato esperado."""
