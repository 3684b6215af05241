"""
Pytest fixtures for the customer records API
"""

import pytest
from fastapi.testclient import TestClient

from customer_api.config import Settings
from customer_api.core.security import build_password_context
from customer_api.database import Database
from customer_api.main import create_app


TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings backed by a throwaway SQLite file"""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def pwd_context():
    return build_password_context(4)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def login(client):
    """Registers a user (if needed) and returns bearer headers for it"""

    def _login(username: str, password: str = "secret") -> dict:
        client.post("/register", json={"username": username, "name": username.title(), "password": password})
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
def sample_customer():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "company": "Analytical Engines",
    }
