from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.health_status import pig_health_status
from pigfarm.domain.value_objects.health import PigHealthStatus
from pigfarm.utils.dates import utcnow


@dataclass(slots=True)
class PigHealthEntry:
    pig: Pig
    status: PigHealthStatus
    open_records: list[HealthRecord] = field(default_factory=list)


@dataclass(slots=True)
class HealthOverview:
    overdue: list[PigHealthEntry]
    upcoming: list[PigHealthEntry]
    good_count: int


async def execute(uow: UnitOfWork, farm_id: UUID, now: datetime | None = None) -> HealthOverview:
    """Group the herd by health standing: overdue, upcoming (3 days) or good."""
    now = now or utcnow()
    open_by_pig: dict[UUID, list[HealthRecord]] = defaultdict(list)
    for record in await uow.health_records.list_open(farm_id):
        open_by_pig[record.pig_id].append(record)

    overdue: list[PigHealthEntry] = []
    upcoming: list[PigHealthEntry] = []
    good_count = 0
    for pig in await uow.pigs.list(farm_id):
        records = open_by_pig.get(pig.id, [])
        status = pig_health_status(records, now)
        if status is PigHealthStatus.OVERDUE:
            overdue.append(PigHealthEntry(pig, status, records))
        elif status is PigHealthStatus.UPCOMING:
            upcoming.append(PigHealthEntry(pig, status, records))
        else:
            good_count += 1
    return HealthOverview(overdue=overdue, upcoming=upcoming, good_count=good_count)
