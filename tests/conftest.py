import uuid

import pytest
from fastapi.testclient import TestClient

from tasktracker.main import create_app

PASSWORD = "secret1"
WHEN = "2026-10-17T10:00:00Z"


@pytest.fixture
def app(tmp_path):
    return create_app(f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def client(app):
    # entering the client runs the lifespan (connect / dispose)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


def unique_email(prefix="user"):
    return f"{prefix}_{uuid.uuid4().hex[:8]}@example.com"


def signup(client, first_name="Alice", last_name="Doe", email=None, password=PASSWORD):
    r = client.post("/signup", json={
        "first_name": first_name,
        "last_name": last_name,
        "email": email or unique_email(first_name.lower()),
        "password": password,
    })
    assert r.status_code == 200, r.text
    return r.json()["user"]


def add_task(client, user_id, title="T1", **overrides):
    body = {
        "user_id": user_id,
        "title": title,
        "description": "D1",
        "priority": "high",
        "time": WHEN,
        "status": "open",
    }
    body.update(overrides)
    r = client.post("/addtask", json=body)
    assert r.status_code == 200, r.text
    return r.json()["task"]


@pytest.fixture
def alice(client):
    return signup(client, "Alice", "Doe")


@pytest.fixture
def bob(client):
    return signup(client, "Bob", "Roe")
