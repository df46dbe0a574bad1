# Shared fixtures: a file-backed SQLite database stands in for MySQL

import pytest
from fastapi.testclient import TestClient

from fintrack.main import create_app

from .helpers import create_schema, make_database


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "expenses.db"
    create_schema(path)
    return path


@pytest.fixture
def api_client(db_path):
    """Create a test version of the API with the SQLite database injected"""
    app = create_app(database=make_database(db_path))
    with TestClient(app) as client:
        yield client
