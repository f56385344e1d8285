"""
Tests para los listados, búsquedas y ranking de popularidad.
"""
import pytest

from services.news.app.application.news_query_use_case import NewsQueryUseCase
from services.news.app.domain.exceptions import EmptyQueryError, ValidationError
from services.news.tests.factories import make_news


@pytest.fixture
def use_case(repository):
    return NewsQueryUseCase(repository)


class TestListing:

    def test_newest_first_with_total(self, use_case, repository):
        for i in range(15):
            repository.save(make_news(i))

        page = use_case.list_news(1, 10)

        assert page.total == 15
        assert page.total_pages == 2
        assert [n.title for n in page.items[:2]] == ["Noticia 14", "Noticia 13"]

    def test_out_of_range_parameters_are_clamped(self, use_case, repository):
        for i in range(25):
            repository.save(make_news(i))

        page = use_case.list_news(0, 500)

        assert (page.page, page.size) == (1, 10)
        assert len(page.items) == 10

    def test_deleted_news_are_hidden(self, use_case, repository):
        kept = repository.save(make_news(1))
        removed = repository.save(make_news(2))
        repository.soft_delete(removed.id)

        page = use_case.list_news()

        assert [n.id for n in page.items] == [kept.id]
        assert page.total == 1


class TestHotNews:

    def test_default_limit_is_ten(self, use_case, repository):
        for i in range(12):
            repository.save(make_news(i, hotness_score=float(i)))

        hot = use_case.hot_news()

        assert len(hot) == 10
        assert hot[0].hotness_score == 11.0

    @pytest.mark.parametrize("limit", [0, 1000])
    def test_invalid_limit_returns_at_most_ten(self, use_case, repository, limit):
        for i in range(12):
            repository.save(make_news(i))

        assert len(use_case.hot_news(limit)) == 10

    def test_ties_are_broken_by_id(self, use_case, repository):
        ids = [repository.save(make_news(i, hotness_score=5.0)).id for i in range(3)]
        top = repository.save(make_news(3, hotness_score=9.0)).id

        hot = use_case.hot_news(4)

        assert [n.id for n in hot] == [top] + ids


class TestSearchAndFilters:

    def test_search_matches_title_content_and_tags(self, use_case, repository):
        repository.save(make_news(1, title="Elecciones generales"))
        repository.save(make_news(2, content="Resultados de las ELECCIONES"))
        repository.save(make_news(3, tags='["elecciones"]'))
        repository.save(make_news(4, title="Deportes"))

        page = use_case.search("elecciones")

        assert page.total == 3

    def test_search_treats_wildcards_literally(self, use_case, repository):
        repository.save(make_news(1, title="Subida del 100% del precio"))
        repository.save(make_news(2, title="Subida del 1000 del precio"))

        assert use_case.search("100%").total == 1

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_search_is_rejected(self, use_case, text):
        with pytest.raises(EmptyQueryError):
            use_case.search(text)

    def test_by_category(self, use_case, repository):
        repository.save(make_news(1, category="sports"))
        repository.save(make_news(2, category="tech"))

        page = use_case.by_category("sports")

        assert [n.category for n in page.items] == ["sports"]
        with pytest.raises(ValidationError):
            use_case.by_category("")

    def test_by_title_is_case_insensitive_substring(self, use_case, repository):
        repository.save(make_news(1, title="Cumbre del clima en Madrid"))
        repository.save(make_news(2, title="Economía"))

        assert [n.title for n in use_case.by_title("CLIMA")] == ["Cumbre del clima en Madrid"]
        with pytest.raises(ValidationError):
            use_case.by_title(" ")

    def test_by_event_and_unlinked(self, use_case, repository):
        linked = repository.save(make_news(1, event_id=3))
        free = repository.save(make_news(2))

        assert [n.id for n in use_case.by_event_id(3)] == [linked.id]
        assert [n.id for n in use_case.unlinked().items] == [free.id]
