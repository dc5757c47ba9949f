# backend/app/services/__init__.py
from __future__ import annotations

"""
Optional integrations used by the routes.

- statsig_client: backend event logging (no-op without a server secret)
"""
