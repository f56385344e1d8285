"""
Tests para la gestión individual de noticias.
"""
from datetime import datetime

import pytest

from services.news.app.application.manage_news_use_case import ManageNewsUseCase, NewsDraft
from services.news.app.domain.entities import CounterType, SourceType
from services.news.app.domain.exceptions import ConflictError, NewsNotFoundError, ValidationError
from services.news.tests.factories import make_news


@pytest.fixture
def use_case(repository):
    return ManageNewsUseCase(repository)


def test_create_manual_news(use_case):
    news = use_case.create_news(NewsDraft(title="  Nueva ley aprobada ", link="http://example.com/ley"), creator_id=4)

    assert news.id is not None
    assert news.title == "Nueva ley aprobada"
    assert news.source_type == SourceType.MANUAL
    assert news.created_by == 4
    assert news.published_at is not None


def test_create_with_existing_link_conflicts(use_case, repository, count_news):
    repository.save(make_news(1))

    with pytest.raises(ConflictError):
        use_case.create_news(NewsDraft(title="Otra", guid="nuevo", link="http://example.com/1"))

    assert count_news() == 1


def test_create_without_title_is_rejected(use_case):
    with pytest.raises(ValidationError):
        use_case.create_news(NewsDraft(title=" "))


def test_missing_news_is_not_found(use_case):
    with pytest.raises(NewsNotFoundError) as exc_info:
        use_case.get_news(12345)

    assert str(exc_info.value) == "news not found"


def test_update_ignores_none_values(use_case, repository):
    stored = repository.save(make_news(1))

    updated = use_case.update_news(stored.id, {"title": "Título corregido", "category": None})

    assert updated.title == "Título corregido"
    assert updated.category == "tech"


def test_update_cannot_mark_as_deleted(use_case, repository):
    stored = repository.save(make_news(1))

    with pytest.raises(ValidationError):
        use_case.update_news(stored.id, {"status": "deleted"})

    assert use_case.update_news(stored.id, {"status": "draft"}).status == "draft"
    assert use_case.get_news(stored.id).is_active is True


def test_update_missing_news(use_case):
    with pytest.raises(NewsNotFoundError):
        use_case.update_news(999, {"title": "x"})


def test_soft_delete_hides_news(use_case, repository, count_news):
    stored = repository.save(make_news(1))

    use_case.delete_news(stored.id)

    with pytest.raises(NewsNotFoundError):
        use_case.get_news(stored.id)
    assert count_news() == 1
    with pytest.raises(NewsNotFoundError):
        use_case.delete_news(stored.id)


def test_hard_delete_removes_row(use_case, repository, count_news):
    stored = repository.save(make_news(1))

    use_case.hard_delete_news(stored.id)

    assert count_news() == 0
    with pytest.raises(NewsNotFoundError):
        use_case.hard_delete_news(stored.id)


def test_counters_grow_and_update_hotness(use_case, repository):
    stored = repository.save(make_news(1, published_at=datetime.utcnow()))

    use_case.increment_counter(stored.id, CounterType.VIEW)
    news = use_case.increment_counter(stored.id, CounterType.SHARE, 2)

    assert news.view_count == 1
    assert news.share_count == 2
    assert news.hotness_score > 0


def test_counter_increment_must_be_positive(use_case, repository):
    stored = repository.save(make_news(1))

    with pytest.raises(ValidationError):
        use_case.increment_counter(stored.id, CounterType.LIKE, 0)
    with pytest.raises(NewsNotFoundError):
        use_case.increment_counter(999, CounterType.LIKE)
