from __future__ import annotations

from uuid import UUID

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pig import Pig


async def execute(uow: UnitOfWork, farm_id: UUID, pig_id: UUID) -> Pig:
    pig = await uow.pigs.get(farm_id, pig_id)
    if not pig:
        raise NotFound("Pig not found")
    return pig
