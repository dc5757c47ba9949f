"""
Endpoint tests for the backend app.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import __version__


class TestGreeting:
    def test_root_returns_default_greeting(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Hello World"}

    def test_greeting_follows_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from app.config import get_settings
        from app.main import create_app

        monkeypatch.setenv("GREETING_MESSAGE", "Hola")
        get_settings.cache_clear()

        with TestClient(create_app()) as client:
            response = client.get("/")

        assert response.json() == {"message": "Hola"}

    def test_root_emits_event(self, client: TestClient, events: list[dict]) -> None:
        client.get("/")
        client.get("/")

        assert [e["event_name"] for e in events] == ["greeting_served", "greeting_served"]
        assert events[0]["metadata"] == {"environment": "development"}

    def test_post_not_allowed(self, client: TestClient) -> None:
        assert client.post("/").status_code == 405


class TestHealth:
    def test_health_ok(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_info(self, client: TestClient) -> None:
        body = client.get("/info").json()

        assert body["app_name"] == "starter-backend"
        assert body["environment"] == "development"
        assert body["version"] == __version__

    def test_unknown_path_is_404(self, client: TestClient) -> None:
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestCors:
    def test_preflight_from_vite_dev_server(self, client: TestClient) -> None:
        response = client.options(
            "/",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_unknown_origin_gets_no_cors_header(self, client: TestClient) -> None:
        response = client.get("/", headers={"Origin": "http://evil.example"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
