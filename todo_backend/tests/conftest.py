import os

import pytest
from fastapi.testclient import TestClient

# Point the app at an in-memory SQLite database before it is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from src.api.main import app  # noqa: E402


@pytest.fixture()
def client():
    """
    TestClient with the app lifespan entered. Each test gets a fresh
    in-memory database with an empty todos table.
    """
    with TestClient(app) as c:
        yield c
