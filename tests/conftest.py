import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from spaceship.core.config import Settings
from spaceship.main import create_app
from tests.factories import make_engine


@pytest.fixture
def engine():
    engine = make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def app_settings():
    return Settings(database_url="sqlite://", create_tables_on_startup=False, seed_on_startup=False)


@pytest.fixture
def app(engine, app_settings):
    return create_app(settings=app_settings, engine=engine)


@pytest.fixture
def client(app):
    return TestClient(app)
