"""Shared pytest fixtures for the backend test suite.

Fixture overview
----------------
clean_settings  — autouse; clears the cached Settings and Statsig adapter
                  so environment overrides set by a test take effect
settings        — a fresh Settings instance built from the test environment
client          — FastAPI TestClient around a freshly created app
events          — list capturing every backend event the routes emit
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.services import statsig_client

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GREETING_MESSAGE", raising=False)
    monkeypatch.delenv("STATSIG_SERVER_SECRET", raising=False)
    get_settings.cache_clear()
    statsig_client.reset_statsig_client()
    yield
    get_settings.cache_clear()
    statsig_client.reset_statsig_client()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def client(settings: Settings):
    from app.main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    captured: list[dict] = []

    def _capture(event_name: str, **kwargs) -> None:
        captured.append({"event_name": event_name, **kwargs})

    monkeypatch.setattr("app.api.greeting.log_backend_event", _capture)
    return captured


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT
