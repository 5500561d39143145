from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pigfarm.application.errors import NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.value_objects.gender import Gender


@dataclass(slots=True)
class CreatePigInput:
    tag: str
    gender: str
    name: str | None = None
    breed: str | None = None
    color: str | None = None
    weight: float | None = None
    birth_date: date | None = None
    pen_id: UUID | None = None
    parent_male_id: UUID | None = None
    parent_female_id: UUID | None = None
    notes: str | None = None


def validate_gender(value: str) -> str:
    valid = {g.value for g in Gender}
    normalized = (value or "").lower()
    if normalized not in valid:
        raise ValidationError(f"Invalid gender. Must be one of: {', '.join(sorted(valid))}")
    return normalized


async def execute(uow: UnitOfWork, farm_id: UUID, payload: CreatePigInput) -> Pig:
    gender = validate_gender(payload.gender)
    if not payload.tag or not payload.tag.strip():
        raise ValidationError("tag is required")
    if payload.pen_id is not None:
        pen = await uow.pens.get(farm_id, payload.pen_id)
        if not pen:
            raise NotFound(f"Pen {payload.pen_id} not found")
    pig = Pig.create(
        farm_id=farm_id,
        tag=payload.tag.strip(),
        gender=gender,
        name=payload.name,
        breed=payload.breed,
        color=payload.color,
        weight=payload.weight,
        birth_date=payload.birth_date,
        pen_id=payload.pen_id,
        parent_male_id=payload.parent_male_id,
        parent_female_id=payload.parent_female_id,
        notes=payload.notes,
    )
    created = await uow.pigs.add(pig)
    await uow.commit()
    return created
