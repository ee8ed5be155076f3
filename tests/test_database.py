from pathlib import Path
from types import SimpleNamespace
from typing import cast

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

import todokit.core.database as database_module
from todokit import Database, TodoManager, TodoRepository


def test_install_sqlite_pragmas(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SQLite connect pragmas are installed on new connections."""

    captured: dict[str, object] = {}

    def fake_listen(target: object, event_name: str, handler: object) -> None:
        captured["target"] = target
        captured["event_name"] = event_name
        captured["handler"] = handler

    fake_engine = cast(AsyncEngine, SimpleNamespace(sync_engine=object()))
    monkeypatch.setattr(database_module.event, "listen", fake_listen)

    database_module._install_sqlite_connect_pragmas(fake_engine, busy_timeout_ms=2500)

    assert captured["target"] is fake_engine.sync_engine
    assert captured["event_name"] == "connect"
    handler = captured["handler"]
    assert callable(handler)

    class DummyCursor:
        def __init__(self) -> None:
            self.commands: list[str] = []
            self.closed = False

        def execute(self, sql: str) -> None:
            self.commands.append(sql)

        def close(self) -> None:
            self.closed = True

    class DummyConnection:
        def __init__(self) -> None:
            self._cursor = DummyCursor()

        def cursor(self) -> DummyCursor:
            return self._cursor

    connection = DummyConnection()
    handler(connection, None)

    assert connection._cursor.commands == [
        "PRAGMA foreign_keys=ON;",
        "PRAGMA synchronous=NORMAL;",
        "PRAGMA busy_timeout=2500;",
        "PRAGMA temp_store=MEMORY;",
    ]
    assert connection._cursor.closed is True


class TestDatabase:
    """Tests for the Database class."""

    async def test_init_creates_tables(self) -> None:
        """Test that init() creates the tasks table."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        async with db.session() as session:
            result = await session.execute(text("SELECT name FROM sqlite_master WHERE type='table' AND name='tasks'"))
            assert result.scalar() == "tasks"

        await db.dispose()

    async def test_store_timeout_default_and_override(self) -> None:
        """Test that the store timeout is kept on the instance."""
        default_db = Database("sqlite+aiosqlite:///:memory:")
        custom_db = Database("sqlite+aiosqlite:///:memory:", store_timeout=0.5)

        assert default_db.store_timeout == database_module.DEFAULT_STORE_TIMEOUT
        assert custom_db.store_timeout == 0.5

        await default_db.dispose()
        await custom_db.dispose()

    async def test_session_factory_configuration(self) -> None:
        """Test that session factory is configured correctly."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        assert db._session_factory.kw.get("expire_on_commit") is False

        await db.dispose()

    async def test_ping_connected(self) -> None:
        """Test that ping succeeds on a live database."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        assert await db.ping() is True

        await db.dispose()

    async def test_ping_unreachable(self, tmp_path: Path) -> None:
        """Test that ping reports False instead of raising when the store is unreachable."""
        db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'todo.db'}")

        assert await db.ping() is False

        await db.dispose()

    async def test_file_based_database_with_alembic_migrations(self, tmp_path: Path) -> None:
        """Test that file-based databases use Alembic migrations to create schema."""
        db_path = tmp_path / "todo.db"
        db = Database(f"sqlite+aiosqlite:///{db_path}")
        await db.init()

        try:
            async with db.session() as session:
                result = await session.execute(text("SELECT version_num FROM alembic_version"))
                assert result.scalar() == "0001"

                result = await session.execute(
                    text("SELECT name FROM sqlite_master WHERE type='table' AND name='tasks'")
                )
                assert result.scalar() == "tasks"

            # Data survives a reopen of the same file
            async with db.session() as session:
                created = await TodoManager(TodoRepository(session)).create("Persisted")
        finally:
            await db.dispose()

        reopened = Database(f"sqlite+aiosqlite:///{db_path}")
        await reopened.init()
        try:
            async with reopened.session() as session:
                todos = await TodoManager(TodoRepository(session)).list_all()
            assert [todo.id for todo in todos] == [created.id]
            assert todos[0].created_at == created.created_at
        finally:
            await reopened.dispose()
