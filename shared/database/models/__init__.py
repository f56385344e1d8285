"""
Modelos de base de datos compartidos.
Cada modelo está en su archivo individual para mejor organización.
"""
# Importar la base común
from .base import Base

# Importar todos los modelos para que estén disponibles
from .noticia import Noticia
from .rss_source import RSSSource
from .user import User
from .bulk_import_lock import BulkImportLock

__all__ = [
    'Base',
    'Noticia',
    'RSSSource',
    'User',
    'BulkImportLock'
]
