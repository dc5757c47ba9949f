# backend/app/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for response models.

This module is the API contract layer used by:
- API routes (response_model)
- app.cli.doctor, which validates payloads from a running backend
"""

from pydantic import BaseModel


class Greeting(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str = "ok"


class AppInfo(BaseModel):
    app_name: str
    environment: str
    version: str
