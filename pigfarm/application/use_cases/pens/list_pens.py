from __future__ import annotations

from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pen import Pen


async def execute(uow: UnitOfWork, farm_id: UUID) -> list[Pen]:
    return await uow.pens.list(farm_id)


async def pen_names(uow: UnitOfWork, farm_id: UUID) -> dict[str, str]:
    """Map pen id strings to display names for alert messages."""
    return {str(pen.id): pen.name for pen in await uow.pens.list(farm_id)}
