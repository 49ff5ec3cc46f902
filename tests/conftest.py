"""Shared fixtures: an in-memory database per test and a client wired to it."""

import os

# Override settings BEFORE importing trackstar
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GENERATE_DOCS_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import trackstar.models  # noqa: F401
from trackstar.database import Base, get_db
from trackstar.main import create_app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def app(session_factory):
    app = create_app(init_database=False, generate_docs=False)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def register(client, provider_id="gh-1", email="ada@example.com", name="Ada Lovelace"):
    resp = client.post("/api/users/register", json={
        "providerId": provider_id,
        "provider": "github",
        "name": name,
        "email": email,
        "username": name.split()[0].lower(),
    })
    assert resp.status_code in (200, 201), resp.text
    return resp.json()["data"]


@pytest.fixture
def user(client):
    return register(client)


@pytest.fixture
def headers(user):
    return {"x-user-id": user["id"]}


@pytest.fixture
def other_headers(client):
    other = register(client, provider_id="gh-2", email="grace@example.com", name="Grace Hopper")
    return {"x-user-id": other["id"]}


@pytest.fixture
def habit(client, headers):
    resp = client.post("/api/habits", json={"name": "Meditate", "category": "mindfulness"}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
