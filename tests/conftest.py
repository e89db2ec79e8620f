import pytest
from fastapi.testclient import TestClient

from core.config import settings
from core.database import get_repository, get_store
from core.repository import RecordRepository
from core.seed import SAMPLE_DATA
from core.storage import MemoryStore
from main import app

ADMIN_EMAIL = "admin@storefront.io"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repository(store):
    return RecordRepository(store, seed_data=SAMPLE_DATA)


@pytest.fixture
def client(store, repository, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAILS", [ADMIN_EMAIL])
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, email, password="supersecret", name="Maria Silva"):
    response = client.post(
        f"{settings.API_V1_STR}/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text

    response = client.post(
        f"{settings.API_V1_STR}/auth/login",
        data={"username": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def user_headers(client):
    return register_and_login(client, "maria@storefront.io")


@pytest.fixture
def admin_headers(client):
    return register_and_login(client, ADMIN_EMAIL, name="Administrador")


@pytest.fixture
def login_as(client):
    def _login_as(email, name="Maria Silva"):
        return register_and_login(client, email, name=name)
    return _login_as
