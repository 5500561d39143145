from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pigfarm.interfaces.http.schemas.pigs import PigResponse


class CompatibilityRequest(BaseModel):
    sow_id: UUID
    boar_id: UUID


class CompatibilityResponse(BaseModel):
    compatible: bool
    reason: str


class BreedingCreate(BaseModel):
    sow_id: UUID
    boar_id: UUID
    mating_date: date | None = None
    notes: str | None = None


class BreedingRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    sow_id: UUID
    boar_id: UUID | None
    sow_name: str | None
    boar_name: str | None
    mating_date: date
    expected_birth_date: date
    actual_birth_date: date | None
    number_of_piglets: int | None
    is_pregnant: bool
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class PigletCreate(BaseModel):
    gender: str
    tag: str | None = None
    birth_weight: float | None = None
    color: str | None = None
    notes: str | None = None


class BirthCreate(BaseModel):
    sow_id: UUID
    actual_birth_date: date
    boar_id: UUID | None = None
    number_of_piglets: int | None = None
    piglets: list[PigletCreate] = Field(default_factory=list)
    farm_name: str | None = None
    notes: str | None = None


class BirthResponse(BaseModel):
    record: BreedingRecordResponse
    sow: PigResponse
    piglets: list[PigResponse]


class PregnantSowResponse(BaseModel):
    pig: PigResponse
    days_to_birth: int | None


class BreedingOverviewResponse(BaseModel):
    available_sows: list[PigResponse]
    available_boars: list[PigResponse]
    pregnant_sows: list[PregnantSowResponse]


class PigSnapshot(BaseModel):
    """A pig as held by the dashboard; dates stay raw strings."""

    id: str = Field(min_length=1)
    name: str
    gender: str
    tag: str | None = None
    pen_id: str | None = None
    birth_date: str | None = None
    is_pregnant: bool = False
    pregnancy_start_date: str | None = None
    expected_birth_date: str | None = None
    actual_birth_date: str | None = None
    parent_male_id: str | None = None
    parent_female_id: str | None = None


class EvaluateAlertsRequest(BaseModel):
    pigs: list[PigSnapshot]
    notified_ids: list[str] = Field(default_factory=list)
    pen_names: dict[str, str] = Field(default_factory=dict)
    as_of: datetime | None = None

    @field_validator("as_of")
    def ensure_aware_utc(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return v
        if v.tzinfo is None or v.tzinfo.utcoffset(v) is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class AlertResponse(BaseModel):
    type: str
    message: str
    severity: str
    pig_id: str | None


class OverduePigResponse(BaseModel):
    id: str
    name: str
    tag: str | None = None
    pen_id: str | None = None
    expected_birth_date: str | None = None


class AlertReportResponse(BaseModel):
    alerts: list[AlertResponse]
    newly_overdue: list[OverduePigResponse]
    notified_ids: list[str]
