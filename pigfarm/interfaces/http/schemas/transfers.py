from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pigfarm.interfaces.http.schemas.pigs import PigResponse


class PigTransferCreate(BaseModel):
    new_pen_id: UUID
    transfer_reason: str = Field(min_length=1)
    transfer_notes: str | None = None
    version: int | None = None


class PenTransferResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pig_id: UUID
    from_pen_id: UUID | None
    to_pen_id: UUID
    transfer_reason: str = Field(validation_alias="reason")
    transfer_notes: str | None = Field(validation_alias="notes")
    transferred_at: datetime


class PigTransferResult(BaseModel):
    transfer: PenTransferResponse
    pig: PigResponse
