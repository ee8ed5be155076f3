"""Health check router."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field

from todokit.core.logging import get_logger

from ..router import Router

logger = get_logger(__name__)


class DatabaseState(StrEnum):
    """Store connectivity as reported by the liveness probe."""

    CONNECTED = "Connected"
    DISCONNECTED = "Disconnected"


DatabaseCheck = Callable[[], Awaitable[bool]]


class HealthStatus(BaseModel):
    """Liveness probe response."""

    status: str = Field(default="OK", description="Service liveness indicator")
    timestamp: datetime = Field(description="Current server time in UTC")
    database: DatabaseState = Field(description="Store connectivity")


class HealthRouter(Router):
    """Liveness probe that reports store connectivity without failing on it."""

    def __init__(
        self,
        prefix: str,
        tags: list[str],
        database_check: DatabaseCheck | None = None,
        **kwargs: object,
    ) -> None:
        """Initialize health router with an optional store connectivity check."""
        self.database_check = database_check
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register health check endpoint."""
        database_check = self.database_check

        @self.router.get("/health", summary="Health check", response_model=HealthStatus)
        async def health_check() -> HealthStatus:
            database = DatabaseState.DISCONNECTED
            if database_check is not None:
                try:
                    if await database_check():
                        database = DatabaseState.CONNECTED
                except Exception as e:
                    logger.warning("health.database_check_failed", error=str(e))

            return HealthStatus(timestamp=datetime.now(timezone.utc), database=database)
