from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID

from pigfarm.application.errors import ConflictError, NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.pigs.create_pig import validate_gender
from pigfarm.domain.models.breeding_record import BreedingRecord
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.pig_tags import next_pig_tag
from pigfarm.domain.services.subject import is_female
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PigletInput:
    gender: str
    tag: str | None = None
    birth_weight: float | None = None
    color: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordBirthInput:
    sow_id: UUID
    actual_birth_date: date
    boar_id: UUID | None = None
    piglets: list[PigletInput] = field(default_factory=list)
    number_of_piglets: int | None = None
    farm_name: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordBirthOutput:
    record: BreedingRecord
    sow: Pig
    piglets: list[Pig]


async def _resolve_record(
    uow: UnitOfWork,
    farm_id: UUID,
    sow: Pig,
    payload: RecordBirthInput,
    config: BreedingConfig,
) -> BreedingRecord:
    record = await uow.breeding_records.get_open_for_sow(farm_id, sow.id)
    if record is not None:
        return record
    # No scheduled breeding: back-date the mating from the birth
    boar = await uow.pigs.get(farm_id, payload.boar_id) if payload.boar_id else None
    record = BreedingRecord.create(
        farm_id=farm_id,
        sow_id=sow.id,
        boar_id=boar.id if boar else None,
        sow_name=sow.name,
        boar_name=boar.name if boar else None,
        mating_date=payload.actual_birth_date - timedelta(days=config.gestation_days),
        gestation_days=config.gestation_days,
        notes=payload.notes,
    )
    return await uow.breeding_records.add(record)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordBirthInput,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> RecordBirthOutput:
    sow = await uow.pigs.get(farm_id, payload.sow_id)
    if not sow:
        raise NotFound(f"Sow {payload.sow_id} not found")
    if not is_female(sow):
        raise ValidationError("Only a sow can give birth")
    count = payload.number_of_piglets
    if count is None:
        count = len(payload.piglets)
    if count < 0 or count < len(payload.piglets):
        raise ValidationError("number_of_piglets cannot be less than the piglets listed")

    record = await _resolve_record(uow, farm_id, sow, payload, config)
    record.record_birth(payload.actual_birth_date, count)
    await uow.breeding_records.update(record)

    expected_version = sow.version
    sow.give_birth(payload.actual_birth_date)
    saved = await uow.pigs.save(sow, expected_version=expected_version)
    if not saved:
        raise ConflictError("Sow was modified concurrently")

    tags = await uow.pigs.list_tags(farm_id)
    piglets: list[Pig] = []
    for piglet in payload.piglets:
        tag = piglet.tag or next_pig_tag(payload.farm_name, tags)
        tags.append(tag)
        created = await uow.pigs.add(
            Pig.create(
                farm_id=farm_id,
                tag=tag,
                gender=validate_gender(piglet.gender),
                color=piglet.color,
                weight=piglet.birth_weight,
                birth_date=payload.actual_birth_date,
                pen_id=sow.pen_id,
                parent_male_id=record.boar_id,
                parent_female_id=sow.id,
                notes=piglet.notes,
            )
        )
        piglets.append(created)

    # A new pregnancy may be reported as overdue again
    await uow.notified_births.discard(farm_id, sow.id)
    await uow.commit()
    logger.info("Birth recorded for sow %s: %d piglets", sow.tag, count)
    return RecordBirthOutput(record=record, sow=saved, piglets=piglets)
