import base64
import os

# Point the app at a throwaway in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("BASIC_AUTH_USER", "admin")
os.environ.setdefault("BASIC_AUTH_PASS", "password")

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from utils.ratelimit import limiter


def basic_auth_header(user="admin", password="password"):
    token = base64.b64encode(f"{user}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate the schema around every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    limiter.reset()
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(app, headers=basic_auth_header()) as c:
        yield c


@pytest.fixture()
def lenient_client():
    """Client that turns unhandled server errors into 500 responses."""
    with TestClient(app, headers=basic_auth_header(), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture()
def anon_client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def store(client):
    response = client.post("/stores", json={"name": "A", "location": "Main street 1"})
    assert response.status_code == 201
    return response.json()["store"]


@pytest.fixture()
def product(client):
    response = client.post("/products", json={"name": "Widget"})
    assert response.status_code == 201
    return response.json()["product"]
