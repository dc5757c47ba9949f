# backend/app/api/__init__.py
from __future__ import annotations

"""
API router aggregation.

This module exposes a single `api_router`; the FastAPI app includes it
without a prefix so the greeting is served on `/`.
"""

from fastapi import APIRouter

from . import greeting, health

api_router = APIRouter()
api_router.include_router(greeting.router)
api_router.include_router(health.router)
