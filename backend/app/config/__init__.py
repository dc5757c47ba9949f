# backend/app/config/__init__.py
from __future__ import annotations

"""
Shortcut imports for configuration.

Everything reads settings through `get_settings()` so tests can clear
the cache and re-read the environment.
"""

from .settings import Settings, get_settings  # noqa: F401
