from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from pigfarm.application.errors import ConflictError, NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.pigs.create_pig import validate_gender
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.subject import is_male
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig


@dataclass(slots=True)
class UpdatePigInput:
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
    # Breeding state
    is_pregnant: bool | None = None
    mating_date: date | None = None
    mated_with: str | None = None
    pregnancy_start_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None


_PLAIN_FIELDS = (
    "name",
    "breed",
    "color",
    "weight",
    "birth_date",
    "pen_id",
    "parent_male_id",
    "parent_female_id",
    "status",
    "notes",
    "actual_birth_date",
)


def _pregnancy_changes(
    existing: Pig, payload: UpdatePigInput, config: BreedingConfig
) -> dict:
    if payload.is_pregnant is None:
        return {}
    if not payload.is_pregnant:
        return {
            "is_pregnant": False,
            "pregnancy_start_date": None,
            "expected_birth_date": None,
            "mated_with": None,
        }
    if is_male(existing):
        raise ValidationError("A male pig cannot be pregnant")
    start = payload.pregnancy_start_date or payload.mating_date
    expected = payload.expected_birth_date
    if expected is None and start is not None:
        expected = start + timedelta(days=config.gestation_days)
    data: dict = {"is_pregnant": True}
    if start is not None:
        data["pregnancy_start_date"] = start
        data["actual_birth_date"] = None
    if expected is not None:
        data["expected_birth_date"] = expected
    if payload.mated_with is not None:
        data["mated_with"] = payload.mated_with
    return data


def _pregnancy_reset(existing: Pig, data: dict) -> bool:
    """True when the update starts or ends a pregnancy."""
    if "is_pregnant" in data and data["is_pregnant"] != existing.is_pregnant:
        return True
    if (
        "pregnancy_start_date" in data
        and data["pregnancy_start_date"] != existing.pregnancy_start_date
    ):
        return True
    return data.get("actual_birth_date") is not None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    payload: UpdatePigInput,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> Pig:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.pigs.get(farm_id, pig_id)
    if not existing:
        raise NotFound("Pig not found")

    data: dict = {}
    for field_name in _PLAIN_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if payload.gender is not None:
        data["gender"] = validate_gender(payload.gender)
    if pig_id in (payload.parent_male_id, payload.parent_female_id):
        raise ValidationError("A pig cannot be its own parent")
    data.update(_pregnancy_changes(existing, payload, config))
    if not data:
        return existing

    updated = await uow.pigs.update(
        farm_id,
        pig_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating pig")
    if _pregnancy_reset(existing, data):
        # Each pregnancy gets its own one-shot overdue notice
        await uow.notified_births.discard(farm_id, pig_id)
    await uow.commit()
    return updated
