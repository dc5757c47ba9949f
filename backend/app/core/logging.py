from __future__ import annotations

"""backend/app/core/logging.py

Logging setup for the backend process.

The app only ever uses module loggers (`logging.getLogger(__name__)`);
this module decides where their records go.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "app-console"


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Attach a single stream handler to the root logger.

    Calling this more than once only updates the level, so app reloads
    and tests don't stack duplicate handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


class QuietHealthFilter(logging.Filter):
    """Drop uvicorn access-log records for the liveness probe."""

    _NOISY = ("GET /health ",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def install_access_log_filter() -> None:
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, QuietHealthFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(QuietHealthFilter())
