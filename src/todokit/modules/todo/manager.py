"""Todo manager: transactions, timestamps, bounded store waits, and error translation."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from ulid import ULID

from todokit.core.database import DEFAULT_STORE_TIMEOUT
from todokit.core.exceptions import NotFoundError, StoreError
from todokit.core.logging import get_logger
from todokit.core.models import utcnow

from .models import Todo
from .repository import TodoRepository
from .schemas import TodoOut, TodoStats
from .validation import completion_rate, shape_response

logger = get_logger(__name__)

T = TypeVar("T")

TASK_NOT_FOUND = "Task not found"
FETCH_FAILED = "Failed to fetch tasks"
CREATE_FAILED = "Failed to create task"
UPDATE_FAILED = "Failed to update task"
DELETE_FAILED = "Failed to delete task"

_STORE_FAILURES = (SQLAlchemyError, TimeoutError, OSError)


class TodoManager:
    """Manager for Todo entities; every operation fully applies or not at all."""

    def __init__(self, repo: TodoRepository, *, store_timeout: float = DEFAULT_STORE_TIMEOUT) -> None:
        """Initialize todo manager with repository and per-call store timeout."""
        self.repo = repo
        self.store_timeout = store_timeout

    async def _run(self, operation: str, failure: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Run a store call under the timeout, rolling back and raising StoreError on failure."""
        try:
            return await asyncio.wait_for(fn(), timeout=self.store_timeout)
        except _STORE_FAILURES as e:
            logger.error("todo.store_failed", operation=operation, error=repr(e))
            try:
                await self.repo.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning("todo.rollback_failed", operation=operation, error=repr(rollback_error))
            raise StoreError(failure) from e

    async def _get_or_raise(self, todo_id: ULID) -> Todo:
        todo = await self.repo.find_by_id(todo_id)
        if todo is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return todo

    def _shape(self, todo: Todo) -> TodoOut:
        shaped = shape_response(todo)
        assert shaped is not None
        return shaped

    async def list_all(self) -> list[TodoOut]:
        """Return all live tasks in insertion order."""

        async def op() -> list[TodoOut]:
            todos = await self.repo.find_all()
            return [self._shape(todo) for todo in todos]

        return await self._run("list", FETCH_FAILED, op)

    async def create(self, text: str) -> TodoOut:
        """Persist a new task from pre-validated, pre-trimmed text."""

        async def op() -> TodoOut:
            now = utcnow()
            todo = Todo(id=ULID(), text=text, done=False, created_at=now, updated_at=now)
            await self.repo.save(todo)
            await self.repo.commit()
            return self._shape(todo)

        created = await self._run("create", CREATE_FAILED, op)
        logger.info("todo.created", todo_id=str(created.id))
        return created

    async def mark_done(self, todo_id: ULID) -> TodoOut:
        """Set done=True (idempotent) and advance updated_at."""

        async def op() -> TodoOut:
            todo = await self._get_or_raise(todo_id)
            todo.done = True
            todo.updated_at = utcnow()
            await self.repo.commit()
            return self._shape(todo)

        updated = await self._run("mark_done", UPDATE_FAILED, op)
        logger.info("todo.marked_done", todo_id=str(todo_id))
        return updated

    async def rename(self, todo_id: ULID, text: str) -> TodoOut:
        """Replace the text of a task with pre-validated, pre-trimmed text."""

        async def op() -> TodoOut:
            todo = await self._get_or_raise(todo_id)
            todo.text = text
            todo.updated_at = utcnow()
            await self.repo.commit()
            return self._shape(todo)

        updated = await self._run("rename", UPDATE_FAILED, op)
        logger.info("todo.renamed", todo_id=str(todo_id))
        return updated

    async def delete(self, todo_id: ULID) -> TodoOut:
        """Remove a task and return its pre-deletion snapshot."""

        async def op() -> TodoOut:
            todo = await self._get_or_raise(todo_id)
            snapshot = self._shape(todo)
            await self.repo.delete(todo)
            await self.repo.commit()
            return snapshot

        deleted = await self._run("delete", DELETE_FAILED, op)
        logger.info("todo.deleted", todo_id=str(todo_id))
        return deleted

    async def stats(self) -> TodoStats:
        """Compute completion statistics over all live tasks."""
        todos = await self.list_all()
        return TodoStats(
            total=len(todos),
            done=sum(1 for todo in todos if todo.done),
            completion_rate=completion_rate(todos),
        )
