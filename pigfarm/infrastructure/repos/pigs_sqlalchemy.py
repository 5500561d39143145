from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import distinct, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.errors import ConflictError
from pigfarm.application.interfaces.repositories.pigs import PigRepository
from pigfarm.domain.models.pig import Pig
from pigfarm.infrastructure.db.orm.pig import PigORM

_MUTABLE_FIELDS = (
    "name",
    "gender",
    "breed",
    "color",
    "weight",
    "birth_date",
    "pen_id",
    "parent_male_id",
    "parent_female_id",
    "is_pregnant",
    "pregnancy_start_date",
    "expected_birth_date",
    "actual_birth_date",
    "mated_with",
    "status",
    "notes",
)


class PigsSQLAlchemyRepository(PigRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PigORM) -> Pig:
        return Pig(
            id=orm.id,
            farm_id=orm.farm_id,
            tag=orm.tag,
            name=orm.name,
            gender=orm.gender,
            breed=orm.breed,
            color=orm.color,
            weight=orm.weight,
            birth_date=orm.birth_date,
            pen_id=orm.pen_id,
            parent_male_id=orm.parent_male_id,
            parent_female_id=orm.parent_female_id,
            is_pregnant=orm.is_pregnant,
            pregnancy_start_date=orm.pregnancy_start_date,
            expected_birth_date=orm.expected_birth_date,
            actual_birth_date=orm.actual_birth_date,
            mated_with=orm.mated_with,
            status=orm.status,
            notes=orm.notes,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def _get_orm(self, farm_id: UUID, pig_id: UUID) -> PigORM | None:
        stmt = (
            select(PigORM)
            .where(PigORM.farm_id == farm_id)
            .where(PigORM.id == pig_id)
            .where(PigORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, pig: Pig) -> Pig:
        orm = PigORM(id=pig.id, farm_id=pig.farm_id, tag=pig.tag)
        for field_name in _MUTABLE_FIELDS:
            setattr(orm, field_name, getattr(pig, field_name))
        orm.deleted_at = pig.deleted_at
        orm.created_at = pig.created_at
        orm.updated_at = pig.updated_at
        orm.version = pig.version
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Pig tag already exists for farm") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, pig_id: UUID) -> Pig | None:
        orm = await self._get_orm(farm_id, pig_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        gender: str | None = None,
        pen_id: UUID | None = None,
        is_pregnant: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Pig]:
        stmt = select(PigORM).where(PigORM.farm_id == farm_id)
        stmt = stmt.where(PigORM.deleted_at.is_(None))
        if gender is not None:
            stmt = stmt.where(PigORM.gender == gender)
        if pen_id is not None:
            stmt = stmt.where(PigORM.pen_id == pen_id)
        if is_pregnant is not None:
            stmt = stmt.where(PigORM.is_pregnant.is_(is_pregnant))
        stmt = stmt.order_by(PigORM.tag).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def list_tags(self, farm_id: UUID) -> list[str]:
        # Soft-deleted pigs keep their tag reserved
        stmt = select(PigORM.tag).where(PigORM.farm_id == farm_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(
        self,
        farm_id: UUID,
        pig_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Pig | None:
        orm = await self._get_orm(farm_id, pig_id)
        if not orm or orm.version != expected_version:
            return None
        for key, value in data.items():
            if key not in _MUTABLE_FIELDS:
                raise ValueError(f"Field {key} cannot be updated")
            setattr(orm, key, value)
        orm.version = expected_version + 1
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to update pig due to constraint violation") from exc
        return self._to_domain(orm)

    async def save(self, pig: Pig, *, expected_version: int) -> Pig | None:
        data = {field_name: getattr(pig, field_name) for field_name in _MUTABLE_FIELDS}
        return await self.update(pig.farm_id, pig.id, data, expected_version)

    async def delete(self, farm_id: UUID, pig_id: UUID) -> bool:
        orm = await self._get_orm(farm_id, pig_id)
        if not orm:
            return False
        orm.deleted_at = datetime.now(timezone.utc)
        orm.version += 1
        await self.session.flush()
        return True

    async def list_farm_ids(self) -> list[UUID]:
        stmt = select(distinct(PigORM.farm_id)).where(PigORM.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
