import pytest
from fastapi.testclient import TestClient

from app.db.memory import reset_storage
from app.main import app


@pytest.fixture(autouse=True)
def storage():
    """Fresh process-wide store for every test."""
    return reset_storage()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_client(client):
    """Creates a client through the API and returns its JSON."""
    def _make(**overrides):
        payload = {
            "name": "Raj Enterprises",
            "clientType": "business",
            "contactNumber": "+91 98200 11223",
        }
        payload.update(overrides)
        response = client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
