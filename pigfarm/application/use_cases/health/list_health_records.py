from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.services.health_status import pig_health_status
from pigfarm.domain.value_objects.health import PigHealthStatus
from pigfarm.utils.dates import utcnow


@dataclass(slots=True)
class ListHealthRecordsOutput:
    items: list[HealthRecord]
    status: PigHealthStatus


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    now: datetime | None = None,
) -> ListHealthRecordsOutput:
    """List health records for a pig along with its overall standing."""
    if not await uow.pigs.get(farm_id, pig_id):
        raise NotFound("Pig not found")
    items = await uow.health_records.list_by_pig(farm_id, pig_id)
    return ListHealthRecordsOutput(items=items, status=pig_health_status(items, now or utcnow()))
