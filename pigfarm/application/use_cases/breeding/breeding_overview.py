from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.maturity import is_mature
from pigfarm.domain.services.subject import is_female, is_male
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.utils.dates import days_until, try_parse_instant, utcnow


@dataclass(slots=True)
class PregnantSow:
    pig: Pig
    days_to_birth: int | None


@dataclass(slots=True)
class BreedingOverview:
    available_sows: list[Pig]
    available_boars: list[Pig]
    pregnant_sows: list[PregnantSow]


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    now: datetime | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> BreedingOverview:
    now = now or utcnow()
    pigs = await uow.pigs.list(farm_id)
    available_sows: list[Pig] = []
    available_boars: list[Pig] = []
    pregnant_sows: list[PregnantSow] = []
    for pig in pigs:
        mature = is_mature(pig, now, config).is_mature
        if is_female(pig):
            if pig.is_pregnant:
                expected = try_parse_instant(pig.expected_birth_date)
                pregnant_sows.append(
                    PregnantSow(pig, days_until(expected, now) if expected else None)
                )
            elif mature:
                available_sows.append(pig)
        elif is_male(pig) and mature:
            available_boars.append(pig)
    return BreedingOverview(available_sows, available_boars, pregnant_sows)
