"""Core routers for service endpoints."""

from .health import DatabaseCheck, DatabaseState, HealthRouter, HealthStatus

__all__ = [
    "HealthRouter",
    "HealthStatus",
    "DatabaseState",
    "DatabaseCheck",
]
