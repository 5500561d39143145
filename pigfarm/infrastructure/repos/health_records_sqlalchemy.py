from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.interfaces.repositories.health_records import (
    HealthRecordsRepository,
)
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.value_objects.health import HealthRecordStatus
from pigfarm.infrastructure.db.orm.health_record import HealthRecordORM

_MUTABLE_FIELDS = (
    "event_type",
    "occurred_on",
    "description",
    "next_due",
    "status",
    "veterinarian",
    "notes",
    "completed_at",
)


class HealthRecordsSQLAlchemyRepository(HealthRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthRecordORM) -> HealthRecord:
        return HealthRecord(
            id=orm.id,
            farm_id=orm.farm_id,
            pig_id=orm.pig_id,
            event_type=orm.event_type,
            occurred_on=orm.occurred_on,
            description=orm.description,
            next_due=orm.next_due,
            status=orm.status,
            veterinarian=orm.veterinarian,
            notes=orm.notes,
            completed_at=orm.completed_at,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _live(self, farm_id: UUID):
        return (
            select(HealthRecordORM)
            .where(HealthRecordORM.farm_id == farm_id)
            .where(HealthRecordORM.deleted_at.is_(None))
        )

    async def add(self, record: HealthRecord) -> HealthRecord:
        orm = HealthRecordORM(id=record.id, farm_id=record.farm_id, pig_id=record.pig_id)
        for field_name in _MUTABLE_FIELDS:
            setattr(orm, field_name, getattr(record, field_name))
        orm.created_at = record.created_at
        orm.updated_at = record.updated_at
        orm.version = record.version
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, record_id: UUID) -> HealthRecord | None:
        stmt = self._live(farm_id).where(HealthRecordORM.id == record_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, record: HealthRecord, *, expected_version: int) -> HealthRecord | None:
        orm = await self.session.get(HealthRecordORM, record.id)
        if not orm or orm.deleted_at is not None or orm.version != expected_version:
            return None
        for field_name in _MUTABLE_FIELDS:
            setattr(orm, field_name, getattr(record, field_name))
        orm.updated_at = record.updated_at
        orm.version = record.version
        await self.session.flush()
        return self._to_domain(orm)

    async def list_by_pig(self, farm_id: UUID, pig_id: UUID) -> list[HealthRecord]:
        stmt = (
            self._live(farm_id)
            .where(HealthRecordORM.pig_id == pig_id)
            .order_by(HealthRecordORM.occurred_on.desc(), HealthRecordORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_open(self, farm_id: UUID) -> list[HealthRecord]:
        """Records still awaiting follow-up, soonest due first."""
        stmt = (
            self._live(farm_id)
            .where(HealthRecordORM.status != HealthRecordStatus.COMPLETED.value)
            .where(HealthRecordORM.next_due.is_not(None))
            .order_by(HealthRecordORM.next_due)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def delete(self, record: HealthRecord) -> None:
        """Soft delete"""
        orm = await self.session.get(HealthRecordORM, record.id)
        if orm:
            orm.deleted_at = record.deleted_at
            await self.session.flush()
