"""Pytest configuration and shared fixtures for tests."""

import os

# Must be set before app.config is first imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.store import Store, build_store
from app.interfaces.deps import get_store
from app.main import app


@pytest.fixture
def store() -> Store:
    """Fresh store loaded with the demo data set."""
    return build_store(seed=True)


@pytest.fixture
def empty_store() -> Store:
    return build_store(seed=False)


@pytest.fixture
def client(store: Store) -> TestClient:
    """Test client whose requests all hit the ``store`` fixture."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
