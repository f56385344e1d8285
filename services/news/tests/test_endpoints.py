"""
Tests de la API HTTP del servicio de noticias sobre SQLite en memoria.
"""
import pytest
from fastapi.testclient import TestClient

from services.news.api.endpoints import get_session_factory
from services.news.main import create_app, error_status
from services.news.app.domain.exceptions import (
    BatchWriteError, ConflictError, EmptyQueryError, NewsNotFoundError, NothingUpdatedError
)
from services.news.tests.factories import make_item, make_news
from shared.config.settings import settings

BASE = "/api/v1/news"


@pytest.fixture
def client(session_factory):
    app = create_app(lifespan_handler=None)
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as test_client:
        yield test_client


def test_error_status_mapping():
    assert error_status(EmptyQueryError()) == 400
    assert error_status(NothingUpdatedError()) == 400
    assert error_status(NewsNotFoundError(1)) == 404
    assert error_status(ConflictError("dup")) == 409
    assert error_status(BatchWriteError("boom")) == 500


def test_list_envelope_and_pagination(client, repository):
    for i in range(3):
        repository.save(make_news(i))

    response = client.get(BASE, params={"page": "0", "size": "500"})

    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert len(body["data"]) == 3
    assert body["pagination"] == {"page": 1, "size": 10, "total": 3, "total_pages": 1}


def test_empty_search_is_bad_request(client):
    response = client.get(f"{BASE}/search", params={"query": "  "})

    assert response.status_code == 400
    assert response.json()["message"] == "Search query cannot be empty"


def test_hot_news_limit(client, repository):
    for i in range(12):
        repository.save(make_news(i))

    response = client.get(f"{BASE}/hot", params={"limit": "1000"})

    assert len(response.json()["data"]) == 10


def test_missing_news_is_404(client):
    response = client.get(f"{BASE}/999")

    assert response.status_code == 404
    assert response.json()["message"] == "news not found"


def test_event_association_flow(client, repository):
    ids = [repository.save(make_news(i)).id for i in range(3)]

    response = client.put(f"{BASE}/event-association", json={"news_ids": ids, "event_id": 11})
    assert response.status_code == 200
    assert response.json()["data"]["updated"] == 3

    linked = client.get(f"{BASE}/event/11").json()["data"]
    assert sorted(n["id"] for n in linked) == ids

    response = client.put(f"{BASE}/event-association", json={"news_ids": ids[:1], "event_id": None})
    assert response.json()["data"]["message"] == "News event association removed successfully"
    assert [n["id"] for n in client.get(f"{BASE}/unlinked").json()["data"]] == ids[:1]


def test_event_association_errors(client):
    assert client.put(f"{BASE}/event-association", json={"news_ids": [], "event_id": 1}).status_code == 400
    assert client.put(f"{BASE}/event-association", json={"news_ids": [404], "event_id": 1}).status_code == 400


def test_create_and_conflict(client):
    payload = {"title": "Nueva", "link": "http://example.com/nueva"}

    created = client.post(BASE, json=payload, headers={"X-User-ID": "3"})
    assert created.status_code == 200
    assert created.json()["data"]["created_by"] == 3
    assert created.json()["data"]["source_type"] == "manual"

    assert client.post(BASE, json=payload).status_code == 409


def test_update_delete_and_view(client, repository, count_news):
    news_id = repository.save(make_news(1)).id

    updated = client.put(f"{BASE}/{news_id}", json={"category": "science"})
    assert updated.json()["data"]["category"] == "science"

    view = client.post(f"{BASE}/{news_id}/view")
    assert view.json()["data"]["view_count"] == 1

    assert client.delete(f"{BASE}/{news_id}").status_code == 200
    assert client.get(f"{BASE}/{news_id}").status_code == 404
    assert client.delete(f"{BASE}/admin/{news_id}").status_code == 200
    assert count_news() == 0


def test_admin_import_uses_configured_seed_file(client, write_bulk_file, count_news, monkeypatch):
    monkeypatch.setattr(settings, "NEWS_SEED_FILE", write_bulk_file([make_item(i) for i in range(5)]))

    first = client.post(f"{BASE}/admin/import").json()["data"]
    second = client.post(f"{BASE}/admin/import").json()["data"]

    assert first["imported"] == 5
    assert second["skipped_entirely"] is True
    assert count_news() == 5


def test_admin_import_ignores_path_in_body(client, write_bulk_file, tmp_path, count_news, monkeypatch):
    monkeypatch.setattr(settings, "NEWS_SEED_FILE", str(tmp_path / "missing.json"))
    other = write_bulk_file([make_item(1)], name="other.json")

    response = client.post(f"{BASE}/admin/import", json={"file_path": other})

    assert response.status_code == 500
    assert count_news() == 0


def test_update_rejects_deleted_status(client, repository):
    news_id = repository.save(make_news(1)).id

    assert client.put(f"{BASE}/{news_id}", json={"status": "deleted"}).status_code == 422
    assert client.put(f"{BASE}/{news_id}", json={"status": "archived"}).json()["data"]["status"] == "archived"
    assert client.get(f"{BASE}/{news_id}").status_code == 200


def test_admin_seed_is_idempotent(client):
    first = client.post(f"{BASE}/admin/seed").json()["data"]
    second = client.post(f"{BASE}/admin/seed").json()["data"]

    assert first["admin_created"] is True
    assert first["rss_sources_created"] == 2
    assert second == {"admin_created": False, "rss_sources_created": 0}
