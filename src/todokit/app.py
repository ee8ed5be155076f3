"""Application factory for the todo service."""

from __future__ import annotations

from fastapi import FastAPI

from todokit.api import ServiceBuilder
from todokit.core.config import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the todo service from settings (environment by default)."""
    settings = settings or Settings()
    return ServiceBuilder.from_settings(settings).with_health().with_todos().build()
