"""FastAPI routers and service builder for todokit."""

from todokit.core.api import (
    BaseServiceBuilder,
    DatabaseState,
    HealthRouter,
    HealthStatus,
    ServiceInfo,
    add_error_handlers,
    add_logging_middleware,
    get_database,
    get_session,
    run_app,
)
from todokit.core.logging import configure_logging, get_logger
from todokit.modules.todo import TodoRouter

from .dependencies import get_todo_manager
from .service_builder import ServiceBuilder

__all__ = [
    # Service builders
    "BaseServiceBuilder",
    "ServiceBuilder",
    "ServiceInfo",
    # Routers
    "HealthRouter",
    "HealthStatus",
    "DatabaseState",
    "TodoRouter",
    # Dependencies
    "get_database",
    "get_session",
    "get_todo_manager",
    # Middleware and logging
    "add_error_handlers",
    "add_logging_middleware",
    "configure_logging",
    "get_logger",
    # Utilities
    "run_app",
]
