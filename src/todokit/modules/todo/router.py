"""Todo REST router: list, create, mark done, rename, delete, and stats."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import Body, Depends, Request, status

from todokit.core.api.router import Router
from todokit.core.exceptions import ValidationError

from .manager import TodoManager
from .schemas import ErrorResponse, TodoDeleted, TodoOut, TodoStats
from .validation import parse_task_id, require_task_text

_ERRORS: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

TaskBody = Annotated[dict[str, Any] | None, Body(examples=[{"task": "Buy milk"}])]

INVALID_BODY = "Invalid request body"

_TASK_BODY_DOC: dict[str, Any] = {
    "requestBody": {
        "content": {
            "application/json": {
                "schema": {"type": "object", "properties": {"task": {"type": "string", "maxLength": 200}}},
                "example": {"task": "Buy milk"},
            }
        }
    }
}


async def read_task_body(request: Request) -> dict[str, Any] | None:
    """Parse an optional JSON object body; called after path checks so they take precedence."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError(INVALID_BODY) from None
    if payload is not None and not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY)
    return payload


class TodoRouter(Router):
    """Router exposing the task lifecycle over fixed legacy paths."""

    def __init__(
        self,
        prefix: str,
        tags: Sequence[str],
        manager_factory: Any,
        **kwargs: Any,
    ) -> None:
        """Initialize todo router with manager factory."""
        self.manager_factory = manager_factory
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register task lifecycle routes."""
        manager_factory = self.manager_factory

        @self.router.get(
            "/get",
            response_model=list[TodoOut],
            summary="List tasks",
            responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
        )
        async def list_todos(manager: TodoManager = Depends(manager_factory)) -> list[TodoOut]:
            return await manager.list_all()

        @self.router.post(
            "/add",
            response_model=TodoOut,
            status_code=status.HTTP_201_CREATED,
            summary="Create task",
            responses=_ERRORS,
        )
        async def create_todo(
            payload: TaskBody = None,
            manager: TodoManager = Depends(manager_factory),
        ) -> TodoOut:
            # Reject invalid text before any store access
            text = require_task_text(payload)
            return await manager.create(text)

        @self.router.put(
            "/edit/{task_id}",
            response_model=TodoOut,
            summary="Mark task done",
            description="Sets done=true; repeating the call is harmless and there is no inverse.",
            responses=_ERRORS,
        )
        async def mark_done(task_id: str, manager: TodoManager = Depends(manager_factory)) -> TodoOut:
            return await manager.mark_done(parse_task_id(task_id))

        @self.router.put(
            "/update/{task_id}",
            response_model=TodoOut,
            summary="Rename task",
            description="Checks the id format first, then the body, then existence.",
            responses=_ERRORS,
            openapi_extra=_TASK_BODY_DOC,
        )
        async def rename_todo(
            task_id: str,
            request: Request,
            manager: TodoManager = Depends(manager_factory),
        ) -> TodoOut:
            todo_id = parse_task_id(task_id)
            text = require_task_text(await read_task_body(request))
            return await manager.rename(todo_id, text)

        @self.router.delete(
            "/delete/{task_id}",
            response_model=TodoDeleted,
            summary="Delete task",
            responses=_ERRORS,
        )
        async def delete_todo(task_id: str, manager: TodoManager = Depends(manager_factory)) -> TodoDeleted:
            deleted = await manager.delete(parse_task_id(task_id))
            return TodoDeleted(deleted_task=deleted)

        @self.router.get(
            "/stats",
            response_model=TodoStats,
            summary="Completion statistics",
            responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
        )
        async def todo_stats(manager: TodoManager = Depends(manager_factory)) -> TodoStats:
            return await manager.stats()
