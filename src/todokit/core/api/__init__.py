"""FastAPI framework layer - routers, middleware, utilities."""

from .dependencies import get_database, get_session, set_database
from .middleware import (
    add_error_handlers,
    add_logging_middleware,
    database_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from .router import Router
from .routers import DatabaseState, HealthRouter, HealthStatus
from .service_builder import BaseServiceBuilder, ServiceInfo
from .utilities import run_app

__all__ = [
    # Base router class
    "Router",
    # Service builder
    "BaseServiceBuilder",
    "ServiceInfo",
    # Dependencies
    "get_database",
    "set_database",
    "get_session",
    # Middleware
    "add_error_handlers",
    "add_logging_middleware",
    "database_error_handler",
    "validation_error_handler",
    "unhandled_error_handler",
    # System routers
    "HealthRouter",
    "HealthStatus",
    "DatabaseState",
    # Utilities
    "run_app",
]
