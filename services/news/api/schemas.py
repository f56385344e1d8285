"""
Esquemas de petición y respuesta de la API de noticias.
"""
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.news.app.domain.entities import News, Page

# El borrado solo se hace mediante DELETE
EditableStatus = Literal["draft", "published", "archived"]


class NewsCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    content: str = ""
    summary: str = ""
    description: str = ""
    source: str = ""
    category: str = ""
    published_at: Optional[datetime] = None
    link: str = ""
    guid: str = ""
    author: str = ""
    image_url: str = ""
    tags: str = ""
    language: str = ""


class NewsUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Optional[str] = Field(default=None, max_length=500)
    content: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    category: Optional[str] = None
    published_at: Optional[datetime] = None
    is_active: Optional[bool] = None
    author: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[str] = None
    language: Optional[str] = None
    status: Optional[EditableStatus] = None
    is_processed: Optional[bool] = None


class EventAssociationRequest(BaseModel):
    news_ids: List[int]
    event_id: Optional[int] = None  # None = eliminar la asociación


def news_to_response(news: News) -> Dict[str, Any]:
    data = asdict(news)
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
        elif isinstance(value, Enum):
            data[key] = value.value
    return data


def success(data: Any = None, message: str = "success") -> Dict[str, Any]:
    return {"code": 200, "message": message, "data": data}


def success_with_pagination(page: Page[News]) -> Dict[str, Any]:
    return {
        "code": 200,
        "message": "success",
        "data": [news_to_response(news) for news in page.items],
        "pagination": {
            "page": page.page,
            "size": page.size,
            "total": page.total,
            "total_pages": page.total_pages
        }
    }
