"""Lightweight Statsig integration for backend events."""
from __future__ import annotations

import logging
from typing import Any

from statsig.statsig_event import StatsigEvent
from statsig.statsig_options import StatsigOptions
from statsig.statsig_server import StatsigServer
from statsig.statsig_user import StatsigUser

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class _StatsigAdapter:
    def __init__(self, secret_key: str | None, environment: str):
        self._client: StatsigServer | None = None
        if not secret_key:
            return

        try:
            client = StatsigServer()
            client.initialize(secret_key, options=StatsigOptions(tier=environment))
            self._client = client
        except Exception as exc:  # noqa: BLE001
            logger.warning("Statsig initialization failed: %s", exc)
            self._client = None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def log_event(
        self,
        *,
        user_id: str,
        event_name: str,
        value: float | int | str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not self._client:
            return

        try:
            self._client.log_event(
                StatsigEvent(
                    StatsigUser(user_id),
                    event_name,
                    value=value,
                    metadata=metadata,
                )
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig event failed: %s", exc)

    def shutdown(self) -> None:
        if not self._client:
            return

        try:
            self._client.shutdown()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig shutdown failed: %s", exc)


_statsig_client: _StatsigAdapter | None = None


def get_statsig_client(settings: Settings | None = None) -> _StatsigAdapter:
    """Return the process-wide adapter, building it from `settings` on first use."""
    global _statsig_client
    if _statsig_client is None:
        settings = settings or get_settings()
        _statsig_client = _StatsigAdapter(
            settings.statsig_server_secret, settings.environment
        )
    return _statsig_client


def reset_statsig_client() -> None:
    """Drop the cached adapter so the next call re-reads settings."""
    global _statsig_client
    _statsig_client = None


def log_backend_event(
    event_name: str,
    *,
    user_id: str = "backend",
    value: float | int | str | None = None,
    metadata: dict[str, Any] | None = None,
) -> None:
    client = get_statsig_client()
    client.log_event(user_id=user_id, event_name=event_name, value=value, metadata=metadata)


def shutdown_statsig() -> None:
    """Flush and drop the adapter; nothing to do if it was never built."""
    global _statsig_client
    if _statsig_client is None:
        return
    _statsig_client.shutdown()
    _statsig_client = None
