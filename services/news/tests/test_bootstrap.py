"""
Tests para la cuenta de administrador inicial y las fuentes RSS por defecto.
"""
import pytest

from services.news.app.application.seed_data_use_case import (
    SeedDefaultDataUseCase, admin_credentials_from_settings
)
from services.news.app.config import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_USERNAME, DEFAULT_RSS_SOURCES
from services.news.app.domain.entities import AdminCredentials
from services.news.app.domain.exceptions import ConflictError, InvalidCredentialError
from services.news.app.infrastructure.bootstrap_repository import (
    SqlAlchemyBootstrapRepository, hash_password, verify_password
)
from shared.config.settings import Settings
from shared.database.models import RSSSource, User


@pytest.fixture
def use_case(session_factory):
    return SeedDefaultDataUseCase(SqlAlchemyBootstrapRepository(session_factory))


def count(session_factory, model):
    session = session_factory()
    try:
        return session.query(model).count()
    finally:
        session.close()


VALID = AdminCredentials(email="root@example.com", username="root", password="secret123")


class TestInitialAdmin:

    def test_created_once(self, use_case, session_factory):
        assert use_case.seed_initial_admin(VALID) is True
        assert use_case.seed_initial_admin(VALID) is False
        assert count(session_factory, User) == 1

    def test_password_is_hashed(self, use_case, session_factory):
        use_case.seed_initial_admin(VALID)

        session = session_factory()
        try:
            admin = session.query(User).one()
            assert admin.password_hash != VALID.password
            assert verify_password(VALID.password, admin.password_hash)
            assert admin.role == "admin"
        finally:
            session.close()

    @pytest.mark.parametrize("credentials", [
        AdminCredentials(email="not-an-email", username="root", password="secret123"),
        AdminCredentials(email="root@example.com", username="root", password="onlyletters"),
        AdminCredentials(email="root@example.com", username="x", password="secret123"),
    ])
    def test_invalid_credentials_create_nothing(self, use_case, session_factory, credentials):
        with pytest.raises(InvalidCredentialError):
            use_case.seed_initial_admin(credentials)

        assert count(session_factory, User) == 0

    def test_email_taken_by_regular_user(self, use_case, session_factory):
        session = session_factory()
        session.add(User(username="reader", email=VALID.email, password_hash=hash_password("x1"), role="user"))
        session.commit()
        session.close()

        with pytest.raises(ConflictError):
            use_case.seed_initial_admin(VALID)

        assert count(session_factory, User) == 1

    def test_defaults_fill_empty_settings(self):
        credentials = admin_credentials_from_settings(Settings(ADMIN_EMAIL="", ADMIN_USERNAME="", ADMIN_PASSWORD=""))

        assert credentials.email == DEFAULT_ADMIN_EMAIL
        assert credentials.username == DEFAULT_ADMIN_USERNAME

    def test_settings_override_defaults(self):
        credentials = admin_credentials_from_settings(Settings(ADMIN_EMAIL="ops@example.com"))

        assert credentials.email == "ops@example.com"
        assert credentials.username == DEFAULT_ADMIN_USERNAME


class TestDefaultRssSources:

    def test_seeded_once(self, use_case, session_factory):
        assert use_case.seed_rss_sources() == len(DEFAULT_RSS_SOURCES)
        assert use_case.seed_rss_sources() == 0
        assert count(session_factory, RSSSource) == len(DEFAULT_RSS_SOURCES)

    def test_existing_source_prevents_seeding(self, use_case, session_factory):
        session = session_factory()
        session.add(RSSSource(name="Propia", url="http://example.com/rss"))
        session.commit()
        session.close()

        assert use_case.seed_rss_sources() == 0
        assert count(session_factory, RSSSource) == 1
