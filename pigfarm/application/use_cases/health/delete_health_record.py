from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, farm_id: UUID, pig_id: UUID, record_id: UUID) -> None:
    """Soft delete a health record."""
    record = await uow.health_records.get(farm_id, record_id)
    if not record or record.pig_id != pig_id:
        raise NotFound("Health record not found")
    record.deleted_at = datetime.now(timezone.utc)
    await uow.health_records.delete(record)
    await uow.commit()
