from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.errors import ConflictError
from pigfarm.application.interfaces.repositories.pens import PenRepository
from pigfarm.domain.models.pen import Pen
from pigfarm.infrastructure.db.orm.pen import PenORM


class PensSQLAlchemyRepository(PenRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PenORM) -> Pen:
        return Pen(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            row_name=orm.row_name,
            capacity=orm.capacity,
            is_occupied=orm.is_occupied,
            created_at=orm.created_at,
        )

    async def add(self, pen: Pen) -> Pen:
        orm = PenORM(
            id=pen.id,
            farm_id=pen.farm_id,
            name=pen.name,
            row_name=pen.row_name,
            capacity=pen.capacity,
            is_occupied=pen.is_occupied,
            created_at=pen.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Pen name already exists for farm") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, pen_id: UUID) -> Pen | None:
        stmt = select(PenORM).where(PenORM.farm_id == farm_id).where(PenORM.id == pen_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID) -> list[Pen]:
        stmt = select(PenORM).where(PenORM.farm_id == farm_id).order_by(PenORM.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]
