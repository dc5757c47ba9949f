from __future__ import annotations

"""
Process-wide helpers shared by the app and the CLI.

Currently provides:
- logging: root logger configuration and the uvicorn access-log filter
"""

from .logging import configure_logging, install_access_log_filter  # noqa: F401
