"""
Fixtures comunes: base de datos SQLite en memoria y ficheros de carga masiva.
"""
import json
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from services.news.app.infrastructure.batch_writer import SqlAlchemyBatchWriter
from services.news.app.infrastructure.database_repository import SqlAlchemyNewsRepository
from shared.database.models import Base, Noticia


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def repository(session_factory):
    return SqlAlchemyNewsRepository(session_factory)


@pytest.fixture
def batch_writer(session_factory):
    return SqlAlchemyBatchWriter(session_factory)


@pytest.fixture
def write_bulk_file(tmp_path):
    def _write(items, name="news.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"news_items": items}, ensure_ascii=False), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def count_news(session_factory):
    """Número de filas en la tabla de noticias, incluidas las borradas lógicamente."""
    def _count():
        session = session_factory()
        try:
            return session.query(Noticia).count()
        finally:
            session.close()
    return _count
