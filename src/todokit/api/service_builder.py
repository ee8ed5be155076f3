"""Service builder with todo module integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Self

from fastapi import FastAPI

from todokit.core.api.service_builder import BaseServiceBuilder, ServiceInfo
from todokit.core.config import Settings
from todokit.modules.todo import TodoRouter

from .dependencies import get_todo_manager as default_get_todo_manager


@dataclass(slots=True)
class _TodoOptions:
    """Internal todo options for ServiceBuilder."""

    prefix: str = ""
    tags: List[str] = field(default_factory=lambda: ["Tasks"])


class ServiceBuilder(BaseServiceBuilder):
    """Service builder with integrated todo module support."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize service builder with module-specific state."""
        super().__init__(**kwargs)
        self._todo_options: _TodoOptions | None = None

    def with_todos(self, *, prefix: str = "", tags: List[str] | None = None) -> Self:
        """Register the task lifecycle endpoints (/get, /add, /edit, /update, /delete, /stats)."""
        self._todo_options = _TodoOptions(prefix=prefix, tags=list(tags) if tags is not None else ["Tasks"])
        return self

    @classmethod
    def from_settings(cls, settings: Settings, *, info: ServiceInfo | None = None) -> Self:
        """Create a builder preconfigured from Settings."""
        builder = cls(
            info=info or ServiceInfo(display_name="Todo Service", summary="Minimal task-list manager"),
            database_url=settings.database_url,
            store_timeout=settings.store_timeout,
        )
        builder.with_logging(settings.request_logging, level=settings.log_level, log_format=settings.log_format)
        if settings.cors_origins:
            builder.with_cors(settings.cors_origins)
        return builder

    def _validate_module_configuration(self) -> None:
        """Validate todo module configuration."""
        if self._todo_options is not None and self._todo_options.prefix.endswith("/"):
            raise ValueError(f"Todo prefix must not end with '/', got '{self._todo_options.prefix}'")

    def _register_module_routers(self, app: FastAPI) -> None:
        """Register todo module routers."""
        if self._todo_options is not None:
            todo_router = TodoRouter.create(
                prefix=self._todo_options.prefix,
                tags=self._todo_options.tags,
                manager_factory=default_get_todo_manager,
            )
            app.include_router(todo_router)
