import pytest
from fastapi.testclient import TestClient

from billing.auth import Identity, get_identities
from billing.database import init_db, close_db, get_session
from billing.main import app

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"


@pytest.fixture(scope="function")
def database(tmp_path):
    """
    Fresh SQLite file per test, opened as the application database.
    """
    init_db(f"sqlite:///{tmp_path / 'billing.db'}")
    yield
    close_db()


@pytest.fixture(scope="function")
def session(database):
    session = get_session()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(database):
    """Client with a fixed identity registry: one admin, one plain user."""
    app.dependency_overrides[get_identities] = lambda: {
        ADMIN_TOKEN: Identity(name="admin", is_admin=True),
        USER_TOKEN: Identity(name="user", is_admin=False),
    }
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}
