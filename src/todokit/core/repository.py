"""Generic async repository over an SQLAlchemy session."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Entity

T = TypeVar("T", bound=Entity)
IdT = TypeVar("IdT")


class BaseRepository(Generic[T, IdT]):
    """Repository providing basic persistence operations for an entity model."""

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        """Initialize repository with database session and model type."""
        self.s = session
        self.model = model

    async def save(self, entity: T) -> T:
        """Stage an entity for insertion or update."""
        self.s.add(entity)
        return entity

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.s.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self.s.rollback()

    async def find_all(self) -> Sequence[T]:
        """Return all entities in insertion order."""
        result = await self.s.scalars(select(self.model).order_by(self.model.created_at, self.model.id))
        return result.all()

    async def find_by_id(self, id: IdT) -> T | None:
        """Find an entity by primary key."""
        return await self.s.get(self.model, id)

    async def delete(self, entity: T) -> None:
        """Stage an entity for deletion."""
        await self.s.delete(entity)
