# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

import main
from core import db, schema

API_PREFIX = main.API_PREFIX

NEMO = {
    "name": "Nemo",
    "variety": "Clownfish",
    "color": "orange",
    "age": "1y",
    "healthStatus": "good",
    "lastHealthCheck": "2024-01-01",
    "notes": "",
    "tankId": "T1",
}


@pytest.fixture
def database(tmp_path):
    database = db.Database(tmp_path / "repo.db", size=2)
    schema.init_schema(database)
    yield database
    database.close()


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "api.db"
    monkeypatch.setenv("DATABASE_PATH", str(path))
    return path


@pytest.fixture
def client(db_path):
    # Entering the context runs the lifespan (open store + create tables).
    with TestClient(main.app) as client:
        yield client


@pytest.fixture
def fish_payload():
    return dict(NEMO)


@pytest.fixture
def nemo(client, fish_payload):
    resp = client.post(f"{API_PREFIX}/fish", json=fish_payload)
    assert resp.status_code == 201
    return resp.json()
