from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from pigfarm.application.errors import BreedingNotAllowed, ConflictError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.breeding.check_compatibility import load_pair
from pigfarm.domain.models.breeding_record import BreedingRecord
from pigfarm.domain.services.compatibility import check_compatibility
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.utils.dates import utcnow

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScheduleBreedingInput:
    sow_id: UUID
    boar_id: UUID
    mating_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: ScheduleBreedingInput,
    *,
    now: datetime | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> BreedingRecord:
    now = now or utcnow()
    sow, boar = await load_pair(uow, farm_id, payload.sow_id, payload.boar_id)
    result = check_compatibility(sow, boar, now, config)
    if not result.compatible:
        raise BreedingNotAllowed(
            "Cannot schedule breeding", details={"reason": result.reason}
        )

    mating_date = payload.mating_date or now.date()
    expected_version = sow.version
    sow.start_pregnancy(mating_date, config.gestation_days, mated_with=boar.name)
    updated = await uow.pigs.save(sow, expected_version=expected_version)
    if not updated:
        raise ConflictError("Sow was modified concurrently")

    record = BreedingRecord.create(
        farm_id=farm_id,
        sow_id=sow.id,
        boar_id=boar.id,
        sow_name=sow.name,
        boar_name=boar.name,
        mating_date=mating_date,
        gestation_days=config.gestation_days,
        notes=payload.notes or f"Scheduled on {mating_date.isoformat()}",
    )
    created = await uow.breeding_records.add(record)
    await uow.notified_births.discard(farm_id, sow.id)
    await uow.commit()
    logger.info(
        "Breeding scheduled: sow=%s boar=%s expected=%s",
        sow.tag,
        boar.tag,
        created.expected_birth_date,
    )
    return created
