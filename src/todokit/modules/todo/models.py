"""Todo ORM model."""

from __future__ import annotations

from sqlalchemy import Boolean, false
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Text

from todokit.core.models import Entity


class Todo(Entity):
    """ORM model for a single task-list entry."""

    __tablename__ = "tasks"

    text: Mapped[str] = mapped_column(Text, nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
