import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import StringStore, get_db
from string_analyzer.main import app


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client(store):
    """Test client backed by a fresh store"""
    app.dependency_overrides[get_db] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
