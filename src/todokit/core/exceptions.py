"""Domain exceptions mapped to HTTP error responses."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors reported to API clients as ``{"error": message}``."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        """Initialize error with a client-facing message."""
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    """Request input failed a shape, length, or identifier format rule."""

    status_code = 400


class NotFoundError(TodoError):
    """Well-formed identifier with no matching live record."""

    status_code = 404


class StoreError(TodoError):
    """Backing store was unreachable or the operation failed."""

    status_code = 500
