from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pigfarm.application.errors import ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pen import Pen


@dataclass(slots=True)
class CreatePenInput:
    name: str
    row_name: str | None = None
    capacity: int | None = None


async def execute(uow: UnitOfWork, farm_id: UUID, payload: CreatePenInput) -> Pen:
    if not payload.name or not payload.name.strip():
        raise ValidationError("name is required")
    if payload.capacity is not None and payload.capacity <= 0:
        raise ValidationError("capacity must be positive")
    pen = Pen.create(
        farm_id=farm_id,
        name=payload.name.strip(),
        row_name=payload.row_name,
        capacity=payload.capacity,
    )
    created = await uow.pens.add(pen)
    await uow.commit()
    return created
