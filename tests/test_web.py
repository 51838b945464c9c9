"""Unit tests for :mod:`fibcalc.web`.

The FastAPI application is exercised in-process through
:class:`fastapi.testclient.TestClient`; no server is started.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fibcalc.web import app as fastapi_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(fastapi_app)


def test_fib_endpoint(client):
    response = client.post("/fib", json={"n": 10})
    assert response.status_code == 200
    assert response.json() == {"F": "55"}


def test_fib_endpoint_returns_string_for_big_values(client):
    response = client.post("/fib", json={"n": 187})
    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["F"], str)
    assert body["F"] == "538522340430300790495419781092981030533"


def test_fib_endpoint_beyond_str_digit_limit(client):
    response = client.post("/fib", json={"n": 25_000})
    assert response.status_code == 200
    assert len(response.json()["F"]) == 5225


@pytest.mark.parametrize("body", [{"n": -1}, {"n": "ten"}, {}, {"m": 3}])
def test_fib_endpoint_rejects_malformed_body(client, body):
    response = client.post("/fib", json=body)
    assert response.status_code == 422


def test_range_endpoint(client):
    response = client.post("/range", json={"start": 3, "end": 10})
    assert response.status_code == 200
    assert response.json() == {
        "start": 3,
        "end": 10,
        "F": ["2", "3", "5", "8", "13", "21", "34", "55"],
    }


def test_range_endpoint_inverted(client):
    response = client.post("/range", json={"start": 10, "end": 5})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid range: end < start"


def test_large_response_is_compressed(client):
    response = client.post(
        "/range",
        json={"start": 0, "end": 500},
        headers={"Accept-Encoding": "gzip"},
    )
    assert response.status_code == 200
    assert response.headers.get("content-encoding") == "gzip"
    assert len(response.json()["F"]) == 501


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
