import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.store import InMemoryProductStore


@pytest.fixture
def store():
    """The three-record catalogue used across the route tests."""
    s = InMemoryProductStore()
    s.insert("Amazing Widget 1", "small")
    s.insert("Great Tool 2", "medium")
    s.insert("Super Gadget 3", "small")
    return s


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def datastar_headers():
    return {"datastar-request": "true"}
