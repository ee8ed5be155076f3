"""Todo schemas for request bodies and client-facing responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from todokit.core.schemas import EntityOut


class TodoOut(EntityOut):
    """Shaped task: exactly id, text, done, createdAt, updatedAt."""

    text: str = Field(description="Trimmed task text")
    done: bool = Field(default=False, description="Completion flag")


class TodoDeleted(BaseModel):
    """Response for a successful delete carrying the pre-deletion snapshot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Task deleted successfully"
    deleted_task: TodoOut


class TodoStats(BaseModel):
    """Completion statistics over all live tasks."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(ge=0)
    done: int = Field(ge=0)
    completion_rate: int = Field(ge=0, le=100, description="Percentage of done tasks, rounded half-up")


class ErrorResponse(BaseModel):
    """Error body returned by every failing request."""

    error: str
