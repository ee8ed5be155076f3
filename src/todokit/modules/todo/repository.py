"""Todo repository for database access."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession
from ulid import ULID

from todokit.core.repository import BaseRepository

from .models import Todo


class TodoRepository(BaseRepository[Todo, ULID]):
    """Repository for Todo entities."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize todo repository with database session."""
        super().__init__(session, Todo)
