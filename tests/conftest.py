import pytest
from fastapi.testclient import TestClient

from elearning.core.config import Settings
from elearning.main import create_app


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'elearning-test.db'}"


@pytest.fixture
def make_client(db_url):
    """Factory so a test can open several clients (e.g. restarts) on one database."""
    clients = []

    def _make(setup=None, **overrides):
        options = {"DATABASE_URL": db_url, "REQUEST_TIMEOUT_SECONDS": 0, **overrides}
        app = create_app(Settings(**options))
        if setup is not None:
            setup(app)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def strict_client(make_client):
    return make_client(STRICT_HTTP_STATUS=True)


@pytest.fixture
def register(client):
    def _register(username="alice", password="s3cret", email=None, role=None):
        body = {"username": username, "email": email or f"{username}@example.com", "password": password}
        if role is not None:
            body["role"] = role
        return client.post("/api/register", json=body).json()
    return _register


@pytest.fixture
def login(client):
    def _login(username="alice", password="s3cret"):
        return client.post("/api/login", json={"username": username, "password": password}).json()
    return _login
