import gzip
import json

import pytest

from ratelimitapi.app import create_app


@pytest.fixture
def client():
    return create_app().test_client()


def test_ping_returns_ok(client):
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.get_json() == {"message": "pong"}


def test_time_returns_429_after_burst(client):
    statuses = [client.get("/api/time").status_code for _ in range(5)]
    assert statuses.count(429) >= 1
    assert statuses[:2] == [200, 200]


def test_routes_are_limited_separately(client):
    for _ in range(3):
        client.get("/api/time")
    assert client.get("/api/ping").status_code == 200


def test_unknown_route_returns_json_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.get_json() == {
        "error": "Not Found",
        "message": "The requested resource could not be found",
    }
    assert response.headers["X-Frame-Options"] == "DENY"


def test_wrong_method_returns_json_405(client):
    response = client.delete("/api/ping")
    assert response.status_code == 405
    assert response.get_json()["error"] == "Method Not Allowed"


def test_post_without_json_is_415(client):
    response = client.post("/api/ping", data="x", content_type="text/plain")
    assert response.status_code == 415


def test_preflight_is_204(client):
    response = client.options("/api/ping")
    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost"


def test_gzip_when_accepted(client):
    response = client.get("/api/ping", headers={"Accept-Encoding": "gzip"})
    assert response.headers["Content-Encoding"] == "gzip"
    assert json.loads(gzip.decompress(response.data)) == {"message": "pong"}


def test_no_gzip_when_not_accepted(client):
    response = client.get("/api/ping")
    assert "Content-Encoding" not in response.headers
    assert response.get_json() == {"message": "pong"}