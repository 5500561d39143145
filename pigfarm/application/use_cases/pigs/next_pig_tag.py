from __future__ import annotations

from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.services.pig_tags import next_pig_tag


async def execute(uow: UnitOfWork, farm_id: UUID, farm_name: str | None) -> str:
    tags = await uow.pigs.list_tags(farm_id)
    return next_pig_tag(farm_name, tags)
