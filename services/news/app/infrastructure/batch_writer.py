"""
Escritor por lotes de noticias.
Persiste una lista completa en una única transacción, enviándola a la
base de datos en sub-lotes de tamaño fijo.
"""
from typing import Callable, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from services.news.app.config import BATCH_WRITER_CHUNK_SIZE
from services.news.app.domain.entities import News
from services.news.app.domain.exceptions import BatchWriteError
from services.news.app.domain.interfaces import BatchWriter
from services.news.app.infrastructure.database_repository import entity_to_model
from shared.database.session import SessionLocal, session_scope
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


class SqlAlchemyBatchWriter(BatchWriter):
    """
    Implementación del escritor por lotes con SQLAlchemy.
    Si falla cualquier sub-lote no queda nada de la llamada confirmado.
    """

    def __init__(self,
                 session_factory: Callable[[], Session] = SessionLocal,
                 chunk_size: int = BATCH_WRITER_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size debe ser mayor que cero")
        self._session_factory = session_factory
        self.chunk_size = chunk_size

    def _insert_chunk(self, session: Session, models: list) -> None:
        """Primitiva de inserción de un sub-lote."""
        session.add_all(models)
        session.flush()

    def write(self, news_list: List[News]) -> List[News]:
        """
        Guarda múltiples noticias de forma atómica.

        Args:
            news_list: Lista ordenada de noticias validadas

        Returns:
            Lista de noticias guardadas con IDs asignados
        """
        if not news_list:
            return news_list

        models = [entity_to_model(news) for news in news_list]

        try:
            with session_scope(self._session_factory) as session:
                for start in range(0, len(models), self.chunk_size):
                    chunk = models[start:start + self.chunk_size]
                    self._insert_chunk(session, chunk)
                    logger.debug(f"💾 Sub-lote {start // self.chunk_size + 1}: {len(chunk)} noticias")

                # Actualizar IDs en las entidades
                for news, model in zip(news_list, models):
                    news.id = model.id  # type: ignore
        except SQLAlchemyError as e:
            logger.error(f"❌ Error guardando lote de {len(news_list)} noticias: {e}")
            for news in news_list:
                news.id = None
            raise BatchWriteError(f"failed to batch insert news: {e}") from e

        logger.info(f"💾 Lote de {len(news_list)} noticias guardado")
        return news_list
