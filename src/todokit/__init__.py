"""Todokit - minimal task-list REST service on FastAPI and async SQLAlchemy."""

# Core framework
from todokit.core import (
    Base,
    BaseRepository,
    Database,
    Entity,
    EntityOut,
    NotFoundError,
    StoreError,
    TodoError,
    ULIDType,
    UTCDateTime,
    ValidationError,
)
from todokit.core.config import Settings

# Todo feature
from todokit.modules.todo import (
    Todo,
    TodoDeleted,
    TodoManager,
    TodoOut,
    TodoRepository,
    TodoStats,
    completion_rate,
    normalize,
    shape_response,
    validate_create,
)

__version__ = "0.1.0"

__all__ = [
    # Core framework
    "Database",
    "BaseRepository",
    "Base",
    "Entity",
    "ULIDType",
    "UTCDateTime",
    "EntityOut",
    "Settings",
    # Errors
    "TodoError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    # Todo feature
    "Todo",
    "TodoOut",
    "TodoDeleted",
    "TodoStats",
    "TodoRepository",
    "TodoManager",
    "normalize",
    "validate_create",
    "completion_rate",
    "shape_response",
    # Version
    "__version__",
]
