import sqlite3

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(DATABASE_PATH=str(tmp_path / "users.db"))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which creates the table
    with TestClient(app) as c:
        yield c


@pytest.fixture
def raw_db(client, settings):
    """Side connection to the same database file, for seeding rows the API would reject."""
    conn = sqlite3.connect(settings.DATABASE_PATH, isolation_level=None)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture
def seed_users(client):
    def _seed(count: int):
        ids = []
        for i in range(count):
            resp = client.post("/users", json={"name": f"user-{i}", "age": 20 + i})
            assert resp.status_code == 201
            ids.append(resp.json()["id"])
        return ids
    return _seed
