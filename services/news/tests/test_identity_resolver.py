"""
Tests para la resolución de identidad por GUID o enlace.
"""
from unittest.mock import Mock

from services.news.app.application.identity_resolver import IdentityResolver
from services.news.app.domain.entities import ResolutionStatus
from services.news.app.domain.exceptions import IdentityLookupError
from services.news.app.domain.interfaces import NewsRepository
from services.news.tests.factories import make_news


class TestIdentityResolverWithMocks:

    def setup_method(self):
        self.mock_repository = Mock(spec=NewsRepository)
        self.resolver = IdentityResolver(self.mock_repository)

    def test_duplicate_returns_existing_record(self):
        existing = make_news(1, id=7)
        self.mock_repository.find_by_guid_or_link.return_value = existing

        resolution = self.resolver.resolve("guid-1", "http://other")

        assert resolution.status == ResolutionStatus.DUPLICATE
        assert resolution.existing is existing
        self.mock_repository.find_by_guid_or_link.assert_called_once_with("guid-1", "http://other")

    def test_not_found(self):
        self.mock_repository.find_by_guid_or_link.return_value = None

        resolution = self.resolver.resolve("guid-1", "http://a")

        assert resolution.is_new
        assert resolution.existing is None

    def test_lookup_error_is_reported_not_raised(self):
        self.mock_repository.find_by_guid_or_link.side_effect = IdentityLookupError("db down")

        resolution = self.resolver.resolve("guid-1", "http://a")

        assert resolution.status == ResolutionStatus.LOOKUP_ERROR
        assert "db down" in resolution.error


class TestIdentityResolverWithDatabase:

    def test_either_signal_is_enough(self, repository):
        stored = repository.save(make_news(1))
        resolver = IdentityResolver(repository)

        by_guid = resolver.resolve("guid-1", "http://changed-link")
        by_link = resolver.resolve("changed-guid", "http://example.com/1")
        neither = resolver.resolve("guid-2", "http://example.com/2")

        assert by_guid.is_duplicate and by_guid.existing.id == stored.id
        assert by_link.is_duplicate and by_link.existing.id == stored.id
        assert neither.is_new

    def test_blank_signals_never_match(self, repository):
        repository.save(make_news(1, guid="", link=""))
        resolver = IdentityResolver(repository)

        assert resolver.resolve("", "").is_new
        assert resolver.resolve("", "http://example.com/9").is_new
