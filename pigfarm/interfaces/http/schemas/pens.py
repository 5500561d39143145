from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PenCreate(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    row_name: str | None = None
    capacity: int | None = None


class PenResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    name: str
    row_name: str | None
    capacity: int | None
    is_occupied: bool
    created_at: datetime
