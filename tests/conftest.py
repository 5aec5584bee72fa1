# File: tests/conftest.py

"""
Shared fixtures: an in-memory SQLite database swapped in for get_db, and
settings with a cheap bcrypt cost so the suite stays fast.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings, get_settings
from app.db.init_db import init_db
from app.db.session import create_db_engine, get_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_settings():
    return Settings(secret_key="test-secret", bcrypt_rounds=4, orders_require_auth=False)


@pytest.fixture
def client(session_factory, test_settings):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
