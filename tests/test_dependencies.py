"""Tests for dependency injection utilities."""

from __future__ import annotations

import pytest

from todokit import Database, TodoManager
from todokit.core.api.dependencies import get_database, get_session, set_database


def test_get_database_uninitialized() -> None:
    """Test get_database raises error when database is not initialized."""
    import todokit.core.api.dependencies as deps

    original_db = deps._database
    deps._database = None

    try:
        with pytest.raises(RuntimeError, match="Database not initialized"):
            get_database()
    finally:
        deps._database = original_db


async def test_set_and_get_database() -> None:
    """Test setting and getting the database instance."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.init()

    try:
        set_database(db)
        assert get_database() is db
    finally:
        await db.dispose()


async def test_get_todo_manager_uses_database_timeout() -> None:
    """Test get_todo_manager builds a TodoManager bounded by the database store timeout."""
    from todokit.api.dependencies import get_todo_manager

    db = Database("sqlite+aiosqlite:///:memory:", store_timeout=1.5)
    await db.init()

    try:
        set_database(db)

        sessions = get_session(db)
        session = await anext(sessions)
        try:
            manager = await get_todo_manager(session, db)
            assert isinstance(manager, TodoManager)
            assert manager.store_timeout == 1.5
            assert await manager.list_all() == []
        finally:
            await sessions.aclose()
    finally:
        await db.dispose()
