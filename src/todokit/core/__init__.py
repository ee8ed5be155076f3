"""Core framework - database, ORM base classes, repository, and errors."""

from .database import Database
from .exceptions import NotFoundError, StoreError, TodoError, ValidationError
from .models import Base, Entity
from .repository import BaseRepository
from .schemas import EntityOut
from .types import ULIDType, UTCDateTime

__all__ = [
    "Database",
    "Base",
    "Entity",
    "BaseRepository",
    "EntityOut",
    "ULIDType",
    "UTCDateTime",
    "TodoError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
