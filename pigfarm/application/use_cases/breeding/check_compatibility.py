from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.compatibility import CompatibilityResult, check_compatibility
from pigfarm.domain.services.subject import is_female, is_male
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.utils.dates import utcnow


async def load_pair(
    uow: UnitOfWork, farm_id: UUID, sow_id: UUID, boar_id: UUID
) -> tuple[Pig | None, Pig | None]:
    sow = await uow.pigs.get(farm_id, sow_id)
    boar = await uow.pigs.get(farm_id, boar_id)
    # A pair only makes sense as a female sow and a male boar
    if sow is not None and not is_female(sow):
        sow = None
    if boar is not None and not is_male(boar):
        boar = None
    return sow, boar


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    sow_id: UUID,
    boar_id: UUID,
    *,
    now: datetime | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> CompatibilityResult:
    sow, boar = await load_pair(uow, farm_id, sow_id, boar_id)
    return check_compatibility(sow, boar, now or utcnow(), config)
