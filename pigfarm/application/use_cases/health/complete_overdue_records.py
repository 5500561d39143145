from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from pigfarm.application.errors import ConflictError, NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.services.health_status import record_status
from pigfarm.domain.value_objects.health import HealthRecordStatus
from pigfarm.utils.dates import utcnow

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    now: datetime | None = None,
) -> list[HealthRecord]:
    """Mark every overdue record of a pig as completed in one go."""
    pig = await uow.pigs.get(farm_id, pig_id)
    if not pig:
        raise NotFound("Pig not found")
    now = now or utcnow()
    completed: list[HealthRecord] = []
    for record in await uow.health_records.list_by_pig(farm_id, pig_id):
        if record_status(record, now) is not HealthRecordStatus.OVERDUE:
            continue
        expected_version = record.version
        record.complete()
        updated = await uow.health_records.update(record, expected_version=expected_version)
        if not updated:
            raise ConflictError("Health record was modified concurrently")
        completed.append(updated)
    await uow.commit()
    if completed:
        logger.info("Completed %d overdue health record(s) for %s", len(completed), pig.tag)
    return completed
