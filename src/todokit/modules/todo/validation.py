"""Pure validation, statistics, and response shaping for todo records.

Nothing in this module touches the store or mutates its input: functions
report problems and callers decide whether to reject.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from ulid import ULID

from todokit.core.exceptions import ValidationError

from .schemas import TodoOut

MAX_TASK_LENGTH = 200

TASK_DATA_REQUIRED = "Task data is required"
TASK_REQUIRED = "Task is required and must be a non-empty string"
TASK_TOO_LONG = "Task must be less than 200 characters"

# Messages returned by the HTTP layer
API_TASK_REQUIRED = "Task is required"
API_INVALID_ID = "Invalid task ID"

# Crockford base32, first character bounded so the value fits in 128 bits
_ULID_PATTERN = re.compile(r"[0-7][0-9A-HJKMNP-TV-Z]{25}", re.IGNORECASE)

_PUBLIC_FIELDS = ("id", "text", "done", "created_at", "updated_at")


class ValidationResult(NamedTuple):
    """Outcome of validating task input."""

    is_valid: bool
    errors: list[str]


def normalize(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()


def validate_create(data: Mapping[str, Any] | None) -> ValidationResult:
    """Check the ``task`` field of a request body, accumulating every violation."""
    if data is None or not isinstance(data, Mapping):
        return ValidationResult(False, [TASK_DATA_REQUIRED])

    errors: list[str] = []
    task = data.get("task")

    if not isinstance(task, str) or not normalize(task):
        errors.append(TASK_REQUIRED)

    if isinstance(task, str) and len(normalize(task)) > MAX_TASK_LENGTH:
        errors.append(TASK_TOO_LONG)

    return ValidationResult(not errors, errors)


def require_task_text(data: Mapping[str, Any] | None) -> str:
    """Return the normalized task text or raise ValidationError with the API message."""
    result = validate_create(data)
    if result.is_valid:
        assert data is not None
        return normalize(data["task"])

    if TASK_TOO_LONG in result.errors and TASK_REQUIRED not in result.errors:
        raise ValidationError(TASK_TOO_LONG)
    raise ValidationError(API_TASK_REQUIRED)


def parse_task_id(raw: str) -> ULID:
    """Parse a path identifier, rejecting anything that is not a ULID."""
    if not isinstance(raw, str) or not _ULID_PATTERN.fullmatch(raw):
        raise ValidationError(API_INVALID_ID)
    try:
        return ULID.from_str(raw.upper())
    except ValueError:
        raise ValidationError(API_INVALID_ID) from None


def _is_done(entry: Any) -> bool:
    if isinstance(entry, Mapping):
        return entry.get("done") is True
    return getattr(entry, "done", None) is True


def completion_rate(tasks: Any) -> int:
    """Percentage (0-100) of entries whose ``done`` is True, rounded half-up."""
    if not isinstance(tasks, Sequence) or isinstance(tasks, (str, bytes)) or not tasks:
        return 0

    total = len(tasks)
    done = sum(1 for entry in tasks if _is_done(entry))
    return (200 * done + total) // (2 * total)


def shape_response(record: Any) -> TodoOut | None:
    """Expose only the client-facing fields of a raw record; None for a missing record."""
    if record is None:
        return None

    if isinstance(record, Mapping):
        data = dict(record)
    else:
        data = {name: getattr(record, name, None) for name in _PUBLIC_FIELDS}

    if data.get("done") is None:
        data["done"] = False

    return TodoOut.model_validate(data)
