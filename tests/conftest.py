"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.app.core.errors import StoreError
from exercise_tracker.app.main import create_app
from exercise_tracker.app.store import MemoryStore, SQLiteStore


class BrokenStore(MemoryStore):
    """Memory store whose writes and queries fail.

    Tests add users through ``seed_user``, which bypasses the failing
    ``create_user``.
    """

    def seed_user(self, username):
        return super().create_user(username)

    def create_user(self, username):
        raise StoreError("database is full")

    def list_users(self):
        raise StoreError("database is locked")

    def create_exercise(self, user_id, description, duration, date):
        raise StoreError("disk I/O error")

    def find_exercises(self, filter, limit=None):
        raise StoreError("no such table: exercises")


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def sqlite_store(tmp_path):
    store = SQLiteStore(str(tmp_path / "exercise_tracker.db"))
    store.init()
    return store


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Each store implementation in turn."""
    if request.param == "memory":
        return MemoryStore()
    store = SQLiteStore(str(tmp_path / "exercise_tracker.db"))
    store.init()
    return store


@pytest.fixture
def client(memory_store):
    """Test client backed by an in-memory store."""
    return TestClient(create_app(store=memory_store))


@pytest.fixture
def sqlite_client(tmp_path):
    """Test client backed by a SQLite file, with startup events run."""
    store = SQLiteStore(str(tmp_path / "api.db"))
    with TestClient(create_app(store=store)) as client:
        yield client


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def broken_client(broken_store):
    return TestClient(create_app(store=broken_store))
