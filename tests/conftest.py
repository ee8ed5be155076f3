"""Test configuration and shared fixtures."""

from __future__ import annotations

import itertools
from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todokit import Database, TodoManager, TodoRepository
from todokit.api import ServiceBuilder, ServiceInfo


def build_app() -> FastAPI:
    """Todo service on a fresh in-memory database."""
    return (
        ServiceBuilder(info=ServiceInfo(display_name="Test Todo Service"))
        .with_health()
        .with_todos()
        .build()
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient with lifespan context, so each test gets an empty store."""
    with TestClient(build_app()) as test_client:
        yield test_client


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create and initialize in-memory database for testing."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.init()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def manager(database: Database) -> AsyncGenerator[TodoManager, None]:
    """Todo manager bound to a session on the in-memory database."""
    async with database.session() as session:
        yield TodoManager(TodoRepository(session))


@pytest.fixture
def ticking_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make each manager timestamp one second later than the previous one."""
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count()
    monkeypatch.setattr("todokit.modules.todo.manager.utcnow", lambda: start + timedelta(seconds=next(ticks)))
