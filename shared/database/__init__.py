"""
Módulo de base de datos compartida.
"""
from .session import SessionLocal, init_database, session_scope
from . import models

from .models import Base, Noticia, RSSSource, User, BulkImportLock

__all__ = ['SessionLocal', 'init_database', 'session_scope', 'models', 'Base',
           'Noticia', 'RSSSource', 'User', 'BulkImportLock']
