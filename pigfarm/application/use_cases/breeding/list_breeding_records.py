from __future__ import annotations

from uuid import UUID

from pigfarm.application.errors import ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.breeding_record import BreedingRecord


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    sow_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[BreedingRecord]:
    """Breeding records, newest mating date first."""
    if limit <= 0 or limit > 200:
        raise ValidationError("limit must be between 1 and 200")
    return await uow.breeding_records.list(farm_id, sow_id=sow_id, limit=limit, offset=offset)
