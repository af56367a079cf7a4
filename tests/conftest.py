"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from students_api.main import create_app
from students_api.storage.sqlite import SqliteStorage


@pytest.fixture
def storage(tmp_path):
    """Fresh SQLite store in a temporary directory"""
    store = SqliteStorage(str(tmp_path / "storage.db"))
    yield store
    store.close()


@pytest.fixture
def client(storage):
    """Test client wired to the temporary store"""
    app = create_app(storage)
    with TestClient(app) as test_client:
        yield test_client
