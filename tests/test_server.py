# tests/test_server.py

from __future__ import annotations

import pytest

from jungle_gem.server.app import create_app


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True}


def test_echo_returns_body_unmodified(client) -> None:
    body = {"Personal": [{"id": "a1", "text": "hi", "done": False}], "n": [1, 2.5, None]}
    response = client.post("/api/echo", json=body)
    assert response.status_code == 200
    assert response.get_json() == {"received": body}


def test_echo_accepts_non_object_json(client) -> None:
    response = client.post("/api/echo", json=[1, "two"])
    assert response.get_json() == {"received": [1, "two"]}


def test_echo_without_json_content_type_echoes_empty_object(client) -> None:
    response = client.post("/api/echo", data="plain text", content_type="text/plain")
    assert response.status_code == 200
    assert response.get_json() == {"received": {}}


def test_echo_malformed_json_is_rejected(client) -> None:
    response = client.post("/api/echo", data="{broken", content_type="application/json")
    assert response.status_code == 400


def test_health_only_allows_get(client) -> None:
    assert client.post("/api/health").status_code == 405


def test_cors_header_present(client) -> None:
    origin = "http://localhost:5173"
    response = client.get("/api/health", headers={"Origin": origin})
    assert response.headers.get("Access-Control-Allow-Origin") in ("*", origin)


def test_echo_empty_json_body_echoes_empty_object(client) -> None:
    response = client.post("/api/echo", data=b"", content_type="application/json")
    assert response.status_code == 200
    assert response.get_json() == {"received": {}}
