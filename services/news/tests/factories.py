"""
Constructores de datos de prueba.
"""
from datetime import datetime, timedelta

from services.news.app.domain.entities import News


def make_news(index: int, **overrides) -> News:
    """Noticia de prueba con GUID y enlace únicos."""
    values = dict(
        id=None,
        title=f"Noticia {index}",
        published_at=datetime(2024, 1, 1, 12, 0, 0) + timedelta(minutes=index),
        content=f"Contenido {index}",
        category="tech",
        link=f"http://example.com/{index}",
        guid=f"guid-{index}"
    )
    values.update(overrides)
    return News(**values)


def make_item(index: int, **overrides) -> dict:
    """Elemento del fichero JSON de carga masiva."""
    item = {
        "title": f"Noticia {index}",
        "content": f"Contenido {index}",
        "summary": "",
        "description": "",
        "source": "Agencia",
        "category": "tech",
        "published_at": "2024-01-01 12:00:00",
        "created_by": None,
        "is_active": True,
        "source_type": "rss",
        "rss_source_id": None,
        "link": f"http://example.com/{index}",
        "guid": f"guid-{index}",
        "author": "Redacción",
        "image_url": "",
        "tags": "[]",
        "language": "es",
        "view_count": 0,
        "like_count": 0,
        "comment_count": 0,
        "share_count": 0,
        "hotness_score": 0.0,
        "status": "published",
        "is_processed": False
    }
    item.update(overrides)
    return item
