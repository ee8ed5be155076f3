"""Base ORM classes for SQLAlchemy models."""

from __future__ import annotations

import datetime

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from ulid import ULID

from .types import ULIDType, UTCDateTime


def utcnow() -> datetime.datetime:
    """Return the current UTC time."""
    return datetime.datetime.now(datetime.timezone.utc)


class Base(AsyncAttrs, DeclarativeBase):
    """Root declarative base with async attribute support."""


class Entity(Base):
    """Abstract ORM entity with ULID primary key and audit timestamps."""

    __abstract__ = True

    id: Mapped[ULID] = mapped_column(ULIDType, primary_key=True, default=lambda: ULID())
    created_at: Mapped[datetime.datetime] = mapped_column(UTCDateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime.datetime] = mapped_column(UTCDateTime, default=utcnow, nullable=False)
