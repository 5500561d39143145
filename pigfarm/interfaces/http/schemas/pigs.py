from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class PigCreate(BaseModel):
    tag: str
    gender: str  # male, female
    name: str | None = None
    breed: str | None = None
    color: str | None = None
    weight: float | None = None
    birth_date: date | None = None
    pen_id: UUID | None = None
    parent_male_id: UUID | None = None
    parent_female_id: UUID | None = None
    notes: str | None = None


class PigUpdate(BaseModel):
    version: int
    name: str | None = None
    breed: str | None = None
    color: str | None = None
    weight: float | None = None
    birth_date: date | None = None
    gender: str | None = None
    pen_id: UUID | None = None
    parent_male_id: UUID | None = None
    parent_female_id: UUID | None = None
    status: str | None = None
    notes: str | None = None
    is_pregnant: bool | None = None
    mating_date: date | None = None
    mated_with: str | None = None
    pregnancy_start_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None


class PigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    tag: str
    name: str
    gender: str
    breed: str | None
    color: str | None
    weight: float | None
    birth_date: date | None
    pen_id: UUID | None
    parent_male_id: UUID | None
    parent_female_id: UUID | None
    is_pregnant: bool
    pregnancy_start_date: date | None
    expected_birth_date: date | None
    actual_birth_date: date | None
    mated_with: str | None
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int
    # Derived
    age_in_months: float | None = None
    is_mature: bool = False
    maturity_reason: str | None = None


class NextTagResponse(BaseModel):
    tag: str
