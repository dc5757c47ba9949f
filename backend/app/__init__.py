# backend/app/__init__.py
from __future__ import annotations

"""
Backend package of the two-tier starter.

Routes live in app/api, configuration in app/config, helpers in app/core,
optional integrations in app/services and the stack doctor in app/cli.
"""

__version__ = "0.1.0"
