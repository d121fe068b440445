"""
Contracting Test Configuration

Shared fixtures for all tests.
"""
import pytest
from fastapi.testclient import TestClient

from contracting.app import app
from contracting.deps import get_store
from contracting.storage import InMemoryStore


@pytest.fixture
def store():
    """Fresh, empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client whose requests all use the ``store`` fixture."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def client_id(client):
    """Id of a freshly created client."""
    resp = client.post("/api/clients", json={"name": "X"})
    assert resp.status_code == 201
    return resp.json()["id"]


@pytest.fixture
def project_id(client, client_id):
    """Id of a freshly created project owned by ``client_id``."""
    resp = client.post(
        "/api/projects",
        json={"code": "P1", "name": "Proj", "clientId": client_id},
    )
    assert resp.status_code == 201
    return resp.json()["id"]
