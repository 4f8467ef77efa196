from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from alumni_admin.main import _gateway_transport, app

from fakes import page_payload


@pytest.fixture
def api(gateway, test_settings, monkeypatch):
    """Test client wired to the fake gateway; overrides are cleared afterwards."""
    monkeypatch.setattr("alumni_admin.main.settings", test_settings)
    app.dependency_overrides[_gateway_transport] = lambda: httpx.MockTransport(gateway)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthcheck(api):
    """Verify the healthcheck endpoint returns a successful response."""
    response = api.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_proxies_page_and_forwards_token(api, gateway):
    gateway.route(
        "GET",
        "/directory",
        json_body=page_payload([{"id": "u1", "name": "Asha Rao"}], key="users", total=1),
    )

    response = api.get(
        "/api/alumni",
        params={"page": 1, "limit": 10, "name": "Asha"},
        headers={"Authorization": "Bearer caller-token"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "items": [{"id": "u1", "name": "Asha Rao"}],
        "pagination": {"page": 1, "limit": 20, "hasMore": False, "total": 1},
    }
    upstream = gateway.calls("GET", "/directory")[0]
    assert upstream.headers["Authorization"] == "Bearer caller-token"
    assert upstream.url.params["name"] == "Asha"
    assert upstream.url.params["limit"] == "10"


def test_list_without_authorization_sends_no_token(api, gateway):
    gateway.route("GET", "/news", json_body=page_payload([]))

    response = api.get("/api/news", params={"search": "alumni"})

    assert response.status_code == 200
    upstream = gateway.calls("GET", "/news")[0]
    assert "Authorization" not in upstream.headers
    assert upstream.url.params["search"] == "alumni"


def test_unknown_resource_returns_404(api, gateway):
    response = api.get("/api/payments")
    assert response.status_code == 404
    assert gateway.requests == []


def test_list_gateway_failure_maps_to_500(api, gateway):
    gateway.route("GET", "/events", json_body={"message": "down"}, status=502)

    response = api.get("/api/events")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch events data"}


def test_detail_returns_record(api, gateway):
    gateway.route("GET", "/profile/u1", json_body={"profile": {"id": "u1", "name": "Asha"}})

    response = api.get("/api/alumni/u1")

    assert response.status_code == 200
    assert response.json() == {"id": "u1", "name": "Asha"}


def test_detail_not_found_returns_404(api, gateway):
    response = api.get("/api/educators/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Educator not found"}


def test_detail_gateway_failure_maps_to_500(api, gateway):
    gateway.route("GET", "/businesses/b1", json_body={"error": "oops"}, status=500)

    response = api.get("/api/businesses/b1")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch businesses details"}
