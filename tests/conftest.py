import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.store import build_stores

@pytest.fixture
def stores():
    # Each test starts with empty stores
    app.state.stores = build_stores()
    return app.state.stores

@pytest.fixture
def client(stores):
    return TestClient(app)
