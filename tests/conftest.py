from __future__ import annotations

import sqlite3

import pytest

from supply_web.app import create_app

API = "/api/supply-requests"


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATABASE_PATH": str(tmp_path / "inventory.db"),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_path(app):
    return app.config["DATABASE_PATH"]


def count_rows(db_path):
    with sqlite3.connect(db_path) as conn:
        return conn.execute("SELECT COUNT(*) FROM supply_requests").fetchone()[0]


def insert_row(db_path, item_name, day, status="pending", priority="medium", requested_by="john"):
    """Insert a row directly, bypassing the API (lets tests pick the date)."""
    with sqlite3.connect(db_path) as conn:
        cursor = conn.execute(
            'INSERT INTO supply_requests ("item name", "quantity", "priority", "status", '
            '"requested by", "date") VALUES (?, ?, ?, ?, ?, ?)',
            (item_name, 1, priority, status, requested_by, day),
        )
        return cursor.lastrowid


class _TestResponse:
    """Adapts a Flask test response to the bits of requests.Response the client uses."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.text = response.get_data(as_text=True)

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError("response has no JSON body")
        return data


class FlaskSession:
    """Stands in for requests.Session, routing calls into the Flask test client."""

    base = "http://testserver"

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, kwargs))
        path = url[len(self.base):]
        response = self.test_client.open(path, method=method, json=kwargs.get("json"))
        return _TestResponse(response)


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
