from __future__ import annotations

from uuid import UUID

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pen_transfer import PenTransfer


async def execute(uow: UnitOfWork, farm_id: UUID, pig_id: UUID) -> list[PenTransfer]:
    """Transfer history for a pig, newest first."""
    if not await uow.pigs.get(farm_id, pig_id):
        raise NotFound("Pig not found")
    return await uow.pen_transfers.list_for_pig(farm_id, pig_id)
