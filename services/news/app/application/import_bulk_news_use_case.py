"""
Caso de uso para importar noticias desde una fuente de carga masiva.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Set

from services.news.app.application.identity_resolver import IdentityResolver
from services.news.app.config import BULK_IMPORT_LOCK_NAME, IMPORT_FLUSH_SIZE, PUBLISHED_AT_FORMAT
from services.news.app.domain.entities import News, NewsCandidate, ResolutionStatus, SourceType
from services.news.app.domain.exceptions import BatchWriteError, BulkImportError, StorageError
from services.news.app.domain.interfaces import BatchWriter, BulkNewsSource, NewsRepository
from shared.database.models.base import utcnow
from shared.services.logging_config import get_logger


logger = get_logger(__name__)


@dataclass
class ImportBulkResult:
    """Resultado del caso de uso de importación masiva."""
    imported: int
    skipped: int
    errors: int
    skipped_entirely: bool
    message: str


def parse_published_at(value: str, index: Optional[int] = None) -> datetime:
    """
    Parsea la fecha de publicación con formato fijo.
    Si no se puede parsear se usa la hora actual y se continúa.
    """
    try:
        return datetime.strptime(value, PUBLISHED_AT_FORMAT)
    except (TypeError, ValueError) as e:
        position = f"del registro {index} " if index is not None else ""
        logger.warning(f"⚠️ No se pudo parsear la fecha de publicación {position}({value!r}), se usa la hora actual: {e}")
        return utcnow()


def candidate_to_entity(candidate: NewsCandidate, published_at: datetime) -> News:
    return News(
        id=None,
        title=candidate.title,
        published_at=published_at,
        content=candidate.content,
        summary=candidate.summary,
        description=candidate.description,
        source=candidate.source,
        category=candidate.category,
        created_by=candidate.created_by,
        is_active=candidate.is_active,
        source_type=SourceType.from_tag(candidate.source_type),
        rss_source_id=candidate.rss_source_id,
        link=candidate.link,
        guid=candidate.guid,
        author=candidate.author,
        image_url=candidate.image_url,
        tags=candidate.tags,
        language=candidate.language,
        view_count=candidate.view_count,
        like_count=candidate.like_count,
        comment_count=candidate.comment_count,
        share_count=candidate.share_count,
        hotness_score=candidate.hotness_score,
        status=candidate.status,
        is_processed=candidate.is_processed
    )


class ImportBulkNewsUseCase:
    """
    Caso de uso para importar noticias en bloque.

    La importación solo se ejecuta con la base de datos vacía. Cada candidata
    se deduplica contra las ya aceptadas en esta misma ejecución y contra las
    almacenadas, y las aceptadas se escriben en lotes de IMPORT_FLUSH_SIZE.
    """

    def __init__(self,
                 bulk_source: BulkNewsSource,
                 news_repository: NewsRepository,
                 batch_writer: BatchWriter,
                 identity_resolver: Optional[IdentityResolver] = None,
                 flush_size: int = IMPORT_FLUSH_SIZE):
        self.bulk_source = bulk_source
        self.news_repository = news_repository
        self.batch_writer = batch_writer
        self.identity_resolver = identity_resolver or IdentityResolver(news_repository)
        self.flush_size = flush_size

    def _flush(self, buffer: List[News]) -> None:
        try:
            self.batch_writer.write(buffer)
        except BatchWriteError as e:
            raise BulkImportError(f"failed to batch insert news: {e}") from e

    def execute(self, location: str) -> ImportBulkResult:
        """
        Ejecuta la importación masiva.

        Args:
            location: Ruta del fichero de la fuente masiva

        Returns:
            ImportBulkResult con noticias importadas y omitidas

        Raises:
            BulkImportError: si falla la escritura de un lote
            BulkSourceError: si la fuente no se puede leer
            StorageError: si no se puede comprobar el estado de la base de datos
        """
        logger.info(f"🔄 Iniciando importación masiva desde {location}...")

        if not self.news_repository.claim_bulk_import(BULK_IMPORT_LOCK_NAME):
            return ImportBulkResult(
                imported=0,
                skipped=0,
                errors=0,
                skipped_entirely=True,
                message="News already present, bulk import skipped"
            )

        try:
            result = self._import(location)
        except Exception:
            self._release_after_failure()
            raise

        self.news_repository.release_bulk_import(BULK_IMPORT_LOCK_NAME)
        return result

    def _release_after_failure(self) -> None:
        """Libera el cerrojo sin ocultar el error que abortó la importación."""
        try:
            self.news_repository.release_bulk_import(BULK_IMPORT_LOCK_NAME)
        except StorageError as e:
            logger.error(f"❌ No se pudo liberar el cerrojo '{BULK_IMPORT_LOCK_NAME}' tras el fallo: {e}")

    def _import(self, location: str) -> ImportBulkResult:
        read_result = self.bulk_source.read(location)
        candidates = read_result.candidates
        logger.info(f"📰 Encontradas {len(candidates)} noticias candidatas")

        buffer: List[News] = []
        seen_keys: Set[str] = set()
        imported = 0
        skipped = 0
        errors = read_result.rejected

        for index, candidate in enumerate(candidates, start=1):
            published_at = parse_published_at(candidate.published_at, index)
            news = candidate_to_entity(candidate, published_at)
            keys = news.identity_keys()

            if any(key in seen_keys for key in keys):
                skipped += 1
                logger.info(f"⏭️ Omitida noticia repetida en el mismo fichero: {candidate.title}")
                continue

            resolution = self.identity_resolver.resolve(news.guid, news.link)
            if resolution.status == ResolutionStatus.DUPLICATE:
                skipped += 1
                logger.info(f"⏭️ Omitida noticia duplicada: {candidate.title}")
                continue
            if resolution.status == ResolutionStatus.LOOKUP_ERROR:
                errors += 1
                continue

            seen_keys.update(keys)
            buffer.append(news)
            imported += 1

            if len(buffer) >= self.flush_size:
                self._flush(buffer)
                buffer = []

        if buffer:
            self._flush(buffer)

        logger.info(f"✅ Importación completada: {imported} importadas, {skipped} duplicadas, {errors} con errores")
        return ImportBulkResult(
            imported=imported,
            skipped=skipped,
            errors=errors,
            skipped_entirely=False,
            message=f"Imported {imported} news, skipped {skipped} duplicates"
        )
