"""Base Pydantic schemas for entity output."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from ulid import ULID


class EntityOut(BaseModel):
    """Base output schema for entities with ULID id and camelCase timestamps."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: ULID
    created_at: datetime
    updated_at: datetime
