from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.errors import NotFound
from pigfarm.application.interfaces.repositories.breeding_records import (
    BreedingRecordsRepository,
)
from pigfarm.domain.models.breeding_record import BreedingRecord
from pigfarm.infrastructure.db.orm.breeding_record import BreedingRecordORM


class BreedingRecordsSQLAlchemyRepository(BreedingRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingRecordORM) -> BreedingRecord:
        return BreedingRecord(
            id=orm.id,
            farm_id=orm.farm_id,
            sow_id=orm.sow_id,
            boar_id=orm.boar_id,
            sow_name=orm.sow_name,
            boar_name=orm.boar_name,
            mating_date=orm.mating_date,
            expected_birth_date=orm.expected_birth_date,
            actual_birth_date=orm.actual_birth_date,
            number_of_piglets=orm.number_of_piglets,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, record: BreedingRecord) -> BreedingRecord:
        orm = BreedingRecordORM(
            id=record.id,
            farm_id=record.farm_id,
            sow_id=record.sow_id,
            boar_id=record.boar_id,
            sow_name=record.sow_name,
            boar_name=record.boar_name,
            mating_date=record.mating_date,
            expected_birth_date=record.expected_birth_date,
            actual_birth_date=record.actual_birth_date,
            number_of_piglets=record.number_of_piglets,
            notes=record.notes,
            created_at=record.created_at,
            updated_at=record.updated_at,
            version=record.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def update(self, record: BreedingRecord) -> BreedingRecord:
        orm = await self.session.get(BreedingRecordORM, record.id)
        if not orm:
            raise NotFound(f"Breeding record {record.id} not found")
        orm.boar_id = record.boar_id
        orm.boar_name = record.boar_name
        orm.mating_date = record.mating_date
        orm.expected_birth_date = record.expected_birth_date
        orm.actual_birth_date = record.actual_birth_date
        orm.number_of_piglets = record.number_of_piglets
        orm.notes = record.notes
        orm.updated_at = record.updated_at
        orm.version = record.version
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        farm_id: UUID,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[BreedingRecord]:
        stmt = select(BreedingRecordORM).where(BreedingRecordORM.farm_id == farm_id)
        if sow_id is not None:
            stmt = stmt.where(BreedingRecordORM.sow_id == sow_id)
        stmt = stmt.order_by(
            BreedingRecordORM.mating_date.desc(), BreedingRecordORM.created_at.desc()
        ).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def get_open_for_sow(self, farm_id: UUID, sow_id: UUID) -> BreedingRecord | None:
        stmt = (
            select(BreedingRecordORM)
            .where(BreedingRecordORM.farm_id == farm_id)
            .where(BreedingRecordORM.sow_id == sow_id)
            .where(BreedingRecordORM.actual_birth_date.is_(None))
            .order_by(BreedingRecordORM.mating_date.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
