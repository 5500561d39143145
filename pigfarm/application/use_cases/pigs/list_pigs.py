from __future__ import annotations

from uuid import UUID

from pigfarm.application.errors import ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.pigs.create_pig import validate_gender
from pigfarm.domain.models.pig import Pig

MAX_LIMIT = 500


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    gender: str | None = None,
    pen_id: UUID | None = None,
    is_pregnant: bool | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[Pig]:
    if limit <= 0 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
    if offset < 0:
        raise ValidationError("offset must be >= 0")
    return await uow.pigs.list(
        farm_id,
        gender=validate_gender(gender) if gender else None,
        pen_id=pen_id,
        is_pregnant=is_pregnant,
        limit=limit,
        offset=offset,
    )
