"""Async SQLAlchemy database connection manager."""

from __future__ import annotations

import asyncio
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from alembic.config import Config
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import ConnectionPoolEntry

from alembic import command
from todokit.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STORE_TIMEOUT = 5.0


def _install_sqlite_connect_pragmas(engine: AsyncEngine, *, busy_timeout_ms: int) -> None:
    """Install SQLite connection pragmas for performance and reliability."""

    def on_connect(dbapi_conn: sqlite3.Connection, _conn_record: ConnectionPoolEntry) -> None:
        """Configure SQLite pragmas on connection."""
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute(f"PRAGMA busy_timeout={busy_timeout_ms};")
        cur.execute("PRAGMA temp_store=MEMORY;")
        cur.close()

    event.listen(engine.sync_engine, "connect", on_connect)


class Database:
    """Async SQLAlchemy database connection manager."""

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        alembic_dir: Path | None = None,
        auto_migrate: bool = True,
        store_timeout: float = DEFAULT_STORE_TIMEOUT,
    ) -> None:
        """Initialize database with connection URL and bounded store wait."""
        self.url = url
        self.alembic_dir = alembic_dir
        self.auto_migrate = auto_migrate
        self.store_timeout = store_timeout
        self.engine: AsyncEngine = create_async_engine(url, echo=echo)
        _install_sqlite_connect_pragmas(self.engine, busy_timeout_ms=int(store_timeout * 1000))
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )
        # In-memory SQLite shares one connection, so sessions must not overlap
        self._memory_lock: asyncio.Lock | None = asyncio.Lock() if self.is_memory else None

    @property
    def is_memory(self) -> bool:
        """Return True for in-memory SQLite databases."""
        return ":memory:" in self.url

    async def init(self) -> None:
        """Initialize database tables using Alembic migrations or direct table creation."""
        # Import Base here to avoid circular import at module level
        from todokit.core.models import Base

        if not self.is_memory:
            async with self.engine.begin() as conn:
                await conn.exec_driver_sql("PRAGMA journal_mode=WAL;")

        if self.is_memory or not self.auto_migrate:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        else:
            alembic_cfg = Config()

            if self.alembic_dir is not None:
                alembic_cfg.set_main_option("script_location", str(self.alembic_dir))
            else:
                alembic_cfg.set_main_option(
                    "script_location", str(Path(__file__).parent.parent.parent.parent / "alembic")
                )

            alembic_cfg.set_main_option("sqlalchemy.url", self.url)

            # Run upgrade in executor to avoid event loop conflicts
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, command.upgrade, alembic_cfg, "head")

    async def ping(self) -> bool:
        """Return True if a trivial query completes within the store timeout."""
        try:
            async with asyncio.timeout(self.store_timeout):
                async with self.session() as session:
                    await session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("database.ping_failed", error=repr(e))
            return False
        return True

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Create a database session context manager."""
        if self._memory_lock is None:
            async with self._session_factory() as s:
                yield s
            return

        async with self._memory_lock:
            async with self._session_factory() as s:
                yield s

    async def dispose(self) -> None:
        """Dispose of database engine and connection pool."""
        await self.engine.dispose()
