from __future__ import annotations

from uuid import UUID

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, farm_id: UUID, pig_id: UUID) -> None:
    deleted = await uow.pigs.delete(farm_id, pig_id)
    if not deleted:
        raise NotFound("Pig not found")
    await uow.notified_births.discard(farm_id, pig_id)
    await uow.commit()
