"""
Saneamiento de parámetros de paginación compartido por todos los listados.
"""
import re
from typing import Any, Optional, Tuple

from services.news.app.config import (
    DEFAULT_HOT_LIMIT, DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_HOT_LIMIT, MAX_PAGE_SIZE
)


INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _to_int(value: Any) -> Optional[int]:
    """Entero exacto: sin espacios, separadores ni signo "+"."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value):
        return int(value)
    return None


def normalize_pagination(page: Any = None, size: Any = None) -> Tuple[int, int]:
    """
    page < 1, ausente o no numérico -> 1.
    size fuera de [1, 100], ausente o no numérico -> 10.
    """
    page_value = _to_int(page)
    if page_value is None or page_value < 1:
        page_value = DEFAULT_PAGE

    size_value = _to_int(size)
    if size_value is None or size_value < 1 or size_value > MAX_PAGE_SIZE:
        size_value = DEFAULT_PAGE_SIZE

    return page_value, size_value


def normalize_hot_limit(limit: Any = None) -> int:
    """limit <= 0, > 100, ausente o no numérico -> 10."""
    limit_value = _to_int(limit)
    if limit_value is None or limit_value <= 0 or limit_value > MAX_HOT_LIMIT:
        return DEFAULT_HOT_LIMIT
    return limit_value
