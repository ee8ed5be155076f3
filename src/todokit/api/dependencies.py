"""Feature-specific FastAPI dependency injection for managers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todokit.core import Database
from todokit.core.api.dependencies import get_database, get_session
from todokit.modules.todo import TodoManager, TodoRepository


async def get_todo_manager(
    session: Annotated[AsyncSession, Depends(get_session)],
    database: Annotated[Database, Depends(get_database)],
) -> TodoManager:
    """Get a todo manager instance for dependency injection."""
    repo = TodoRepository(session)
    return TodoManager(repo, store_timeout=database.store_timeout)
