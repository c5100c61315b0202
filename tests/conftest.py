"""Shared fixtures for the Exercise Tracker test suite."""

import os

# Must be set before the application package reads its settings.
os.environ.setdefault("STORE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.main import app
from exercise_tracker_api.app.store import MemoryStore, get_store


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(store):
    """TestClient whose requests run against a fresh in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(client):
    response = client.post("/api/users", data={"username": "alice"})
    assert response.status_code == 201
    return response.json()
