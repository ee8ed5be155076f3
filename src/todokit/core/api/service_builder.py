"""Base service builder for FastAPI applications without module dependencies."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Awaitable, Callable, Dict, List, Self

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from todokit.core import Database
from todokit.core.database import DEFAULT_STORE_TIMEOUT
from todokit.core.logging import configure_logging, get_logger

from .dependencies import get_database, set_database
from .middleware import add_error_handlers, add_logging_middleware
from .routers import HealthRouter
from .routers.health import DatabaseCheck

logger = get_logger(__name__)


class ServiceInfo(BaseModel):
    """Service metadata for FastAPI application."""

    display_name: str
    version: str = "1.0.0"
    summary: str | None = None
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class BaseServiceBuilder:
    """Base service builder providing core FastAPI functionality without module dependencies."""

    def __init__(
        self,
        *,
        info: ServiceInfo,
        database_url: str = "sqlite+aiosqlite:///:memory:",
        store_timeout: float = DEFAULT_STORE_TIMEOUT,
        include_error_handlers: bool = True,
        include_logging: bool = False,
    ) -> None:
        """Initialize base service builder with core options."""
        self.info = info
        self._database_url = database_url
        self._database_instance: Database | None = None
        self._store_timeout = store_timeout
        self._title = self.info.display_name
        self._app_description = self.info.summary or self.info.description or ""
        self._version = self.info.version
        self._include_error_handlers = include_error_handlers
        self._include_logging = include_logging
        self._log_level = "INFO"
        self._log_format = "console"
        self._cors_origins: List[str] | None = None
        self._health_options: tuple[str, List[str], bool] | None = None
        self._custom_routers: List[APIRouter] = []
        self._dependency_overrides: Dict[Callable[..., object], Callable[..., object]] = {}
        self._startup_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []
        self._shutdown_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []

    # --------------------------------------------------------------------- Fluent configuration

    def with_database(self, url: str) -> Self:
        """Configure database URL."""
        self._database_url = url
        return self

    def with_database_instance(self, database: Database) -> Self:
        """Inject a pre-configured database instance."""
        self._database_instance = database
        return self

    def with_store_timeout(self, seconds: float) -> Self:
        """Bound the wait for any single store call."""
        self._store_timeout = seconds
        return self

    def with_logging(self, enabled: bool = True, *, level: str = "INFO", log_format: str = "console") -> Self:
        """Enable structured logging with request tracing."""
        self._include_logging = enabled
        self._log_level = level
        self._log_format = log_format
        return self

    def with_cors(self, origins: List[str] | None = None) -> Self:
        """Allow cross-origin browser clients (all origins by default)."""
        self._cors_origins = list(origins) if origins is not None else ["*"]
        return self

    def with_health(
        self,
        *,
        prefix: str = "",
        tags: List[str] | None = None,
        include_database_check: bool = True,
    ) -> Self:
        """Add the /health liveness probe."""
        self._health_options = (prefix, list(tags) if tags is not None else ["health"], include_database_check)
        return self

    def include_router(self, router: APIRouter) -> Self:
        """Include a custom router."""
        self._custom_routers.append(router)
        return self

    def override_dependency(self, dependency: Callable[..., object], override: Callable[..., object]) -> Self:
        """Override a dependency for testing or customization."""
        self._dependency_overrides[dependency] = override
        return self

    def on_startup(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a startup hook."""
        self._startup_hooks.append(hook)
        return self

    def on_shutdown(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a shutdown hook."""
        self._shutdown_hooks.append(hook)
        return self

    # --------------------------------------------------------------------- Build mechanics

    def build(self) -> FastAPI:
        """Build and configure the FastAPI application."""
        self._validate_configuration()
        self._validate_module_configuration()  # Extension point for subclasses

        lifespan = self._build_lifespan()
        app = FastAPI(
            title=self._title,
            description=self._app_description,
            version=self._version,
            lifespan=lifespan,
        )
        app.state.database_url = self._database_url

        if self._include_error_handlers:
            add_error_handlers(app)

        if self._include_logging:
            add_logging_middleware(app)

        if self._cors_origins is not None:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=self._cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        if self._health_options:
            prefix, tags, include_database_check = self._health_options
            database_check = self._create_database_health_check() if include_database_check else None
            health_router = HealthRouter.create(prefix=prefix, tags=tags, database_check=database_check)
            app.include_router(health_router)

        # Extension point for module-specific routers
        self._register_module_routers(app)

        for router in self._custom_routers:
            app.include_router(router)

        for dependency, override in self._dependency_overrides.items():
            app.dependency_overrides[dependency] = override

        return app

    # --------------------------------------------------------------------- Extension points

    def _validate_module_configuration(self) -> None:
        """Extension point for module-specific validation (override in subclasses)."""
        pass

    def _register_module_routers(self, app: FastAPI) -> None:
        """Extension point for registering module-specific routers (override in subclasses)."""
        pass

    # --------------------------------------------------------------------- Core helpers

    def _validate_configuration(self) -> None:
        """Validate core configuration."""
        if self._store_timeout <= 0:
            raise ValueError(f"Store timeout must be positive, got {self._store_timeout}")

        if self._log_format not in ("console", "json"):
            raise ValueError(f"Unknown log format '{self._log_format}'. Use 'console' or 'json'.")

    def _build_lifespan(self) -> Callable[[FastAPI], AsyncContextManager[None]]:
        """Build lifespan context manager for app startup/shutdown."""
        database_url = self._database_url
        database_instance = self._database_instance
        store_timeout = self._store_timeout
        include_logging = self._include_logging
        log_level = self._log_level
        log_format = self._log_format
        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            if include_logging:
                configure_logging(level=log_level, log_format=log_format)

            # Use injected database or create new one from URL
            if database_instance is not None:
                database = database_instance
                should_manage_lifecycle = False
            else:
                database = Database(database_url, store_timeout=store_timeout)
                should_manage_lifecycle = True

            # Always initialize database (safe to call multiple times)
            await database.init()

            set_database(database)
            app.state.database = database
            logger.info("service.started", database=database.url, store_timeout=database.store_timeout)

            for hook in startup_hooks:
                await hook(app)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await hook(app)
                app.state.database = None

                # Dispose database only if we created it
                if should_manage_lifecycle:
                    await database.dispose()
                logger.info("service.stopped")

        return lifespan

    @staticmethod
    def _create_database_health_check() -> DatabaseCheck:
        """Create database connectivity health check."""

        async def check_database() -> bool:
            try:
                db = get_database()
            except RuntimeError:
                return False
            return await db.ping()

        return check_database

    # --------------------------------------------------------------------- Convenience

    @classmethod
    def create(cls, *, info: ServiceInfo, **kwargs: Any) -> FastAPI:
        """Create and build a FastAPI application in one call."""
        return cls(info=info, **kwargs).build()
