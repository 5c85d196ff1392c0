import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from darktimer.api.deps import get_content_filter, get_store
from darktimer.app import create_app
from darktimer.core import build_engine
from darktimer.services import ContentFilter
from darktimer.store import MemoryPlayerStore, SQLPlayerStore


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture(params=["sql", "memory"])
def store(request, session):
    if request.param == "sql":
        return SQLPlayerStore(session)
    return MemoryPlayerStore()


@pytest.fixture()
def content_filter():
    return ContentFilter(["darn", "heck"])


@pytest.fixture()
def app(store, content_filter):
    application = create_app()
    application.dependency_overrides[get_store] = lambda: store
    application.dependency_overrides[get_content_filter] = lambda: content_filter
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app)
