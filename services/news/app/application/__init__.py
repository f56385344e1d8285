# Application layer - Use cases and business logic

# Exportar todos los casos de uso para facilitar las importaciones
from .identity_resolver import IdentityResolver
from .import_bulk_news_use_case import ImportBulkNewsUseCase, ImportBulkResult
from .seed_data_use_case import SeedAllDataUseCase, SeedDefaultDataUseCase
from .event_association_use_case import EventAssociationUseCase
from .news_query_use_case import NewsQueryUseCase
from .manage_news_use_case import ManageNewsUseCase, NewsDraft

__all__ = [
    'IdentityResolver',
    'ImportBulkNewsUseCase',
    'ImportBulkResult',
    'SeedAllDataUseCase',
    'SeedDefaultDataUseCase',
    'EventAssociationUseCase',
    'NewsQueryUseCase',
    'ManageNewsUseCase',
    'NewsDraft'
]
