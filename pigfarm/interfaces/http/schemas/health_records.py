from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pigfarm.interfaces.http.schemas.pigs import PigResponse


class HealthRecordCreate(BaseModel):
    type: str = "checkup"
    date: dt.date | None = None
    description: str | None = None
    next_due: dt.date | None = None
    status: str = "completed"
    veterinarian: str | None = None
    notes: str | None = None


class HealthRecordUpdate(BaseModel):
    version: int | None = None
    type: str | None = None
    date: dt.date | None = None
    description: str | None = None
    next_due: dt.date | None = None
    status: str | None = None
    veterinarian: str | None = None
    notes: str | None = None


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pig_id: UUID
    type: str = Field(validation_alias="event_type")
    date: dt.date = Field(validation_alias="occurred_on")
    description: str | None
    next_due: dt.date | None
    status: str
    veterinarian: str | None
    notes: str | None
    completed_at: dt.datetime | None
    created_at: dt.datetime
    updated_at: dt.datetime
    version: int


class HealthRecordListResponse(BaseModel):
    items: list[HealthRecordResponse]
    health_status: str


class PigHealthEntryResponse(BaseModel):
    pig: PigResponse
    status: str
    open_records: list[HealthRecordResponse]


class HealthOverviewResponse(BaseModel):
    overdue: list[PigHealthEntryResponse]
    upcoming: list[PigHealthEntryResponse]
    good_count: int
