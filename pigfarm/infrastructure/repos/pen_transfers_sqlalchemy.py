from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.errors import InfrastructureError
from pigfarm.application.interfaces.repositories.pen_transfers import PenTransfersRepository
from pigfarm.domain.models.pen_transfer import PenTransfer
from pigfarm.infrastructure.db.orm.pen_transfer import PenTransferORM


class PenTransfersSQLAlchemyRepository(PenTransfersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PenTransferORM) -> PenTransfer:
        return PenTransfer(
            id=orm.id,
            farm_id=orm.farm_id,
            pig_id=orm.pig_id,
            from_pen_id=orm.from_pen_id,
            to_pen_id=orm.to_pen_id,
            reason=orm.reason,
            notes=orm.notes,
            transferred_at=orm.transferred_at,
        )

    async def add(self, transfer: PenTransfer) -> PenTransfer:
        orm = PenTransferORM(
            id=transfer.id,
            farm_id=transfer.farm_id,
            pig_id=transfer.pig_id,
            from_pen_id=transfer.from_pen_id,
            to_pen_id=transfer.to_pen_id,
            reason=transfer.reason,
            notes=transfer.notes,
            transferred_at=transfer.transferred_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to record pen transfer") from exc
        return self._to_domain(orm)

    async def list_for_pig(self, farm_id: UUID, pig_id: UUID) -> list[PenTransfer]:
        stmt = (
            select(PenTransferORM)
            .where(PenTransferORM.farm_id == farm_id)
            .where(PenTransferORM.pig_id == pig_id)
            .order_by(PenTransferORM.transferred_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
