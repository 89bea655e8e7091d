"""Application wiring: startup check and request timeout."""
import logging
import time

from fastapi.testclient import TestClient

from config import settings
from database import get_db
from main import app, request_deadline
from models.product import Product


def test_startup_checks_database(caplog):
    caplog.set_level(logging.INFO)
    with TestClient(app):
        pass
    assert "Database connection established successfully." in caplog.text


def test_only_reads_are_bounded():
    assert request_deadline("GET") == settings.REQUEST_TIMEOUT_SECONDS
    assert request_deadline("head") == settings.REQUEST_TIMEOUT_SECONDS
    assert request_deadline("POST") is None
    assert request_deadline("PATCH") is None


def test_slow_write_is_not_cut_off(client, db, monkeypatch):
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 0.01)

    def slow_db():
        time.sleep(0.1)
        yield from get_db()

    app.dependency_overrides[get_db] = slow_db
    response = client.post("/products", json={"name": "Slow"})
    assert response.status_code == 201

    assert [p.name for p in db.query(Product).all()] == ["Slow"]
