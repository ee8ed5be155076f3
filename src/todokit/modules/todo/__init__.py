"""Todo feature - task lifecycle with validation and response shaping."""

from .manager import TodoManager
from .models import Todo
from .repository import TodoRepository
from .router import TodoRouter
from .schemas import ErrorResponse, TodoDeleted, TodoOut, TodoStats
from .validation import (
    ValidationResult,
    completion_rate,
    normalize,
    parse_task_id,
    require_task_text,
    shape_response,
    validate_create,
)

__all__ = [
    "Todo",
    "TodoOut",
    "TodoDeleted",
    "TodoStats",
    "ErrorResponse",
    "TodoRepository",
    "TodoManager",
    "TodoRouter",
    "ValidationResult",
    "normalize",
    "validate_create",
    "require_task_text",
    "parse_task_id",
    "completion_rate",
    "shape_response",
]
