from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pigfarm.application.errors import InfrastructureError
from pigfarm.application.interfaces.repositories.notified_births import (
    NotifiedBirthsRepository,
)
from pigfarm.domain.value_objects.notified_births import NotifiedBirths
from pigfarm.infrastructure.db.orm.overdue_birth_notification import (
    OverdueBirthNotificationORM,
)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class NotifiedBirthsSQLAlchemyRepository(NotifiedBirthsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load(self, farm_id: UUID) -> NotifiedBirths:
        stmt = select(OverdueBirthNotificationORM.pig_id).where(
            OverdueBirthNotificationORM.farm_id == farm_id
        )
        result = await self.session.execute(stmt)
        return NotifiedBirths.of(result.scalars().all())

    async def add(self, farm_id: UUID, pig_ids: Iterable[str]) -> None:
        """Record pig ids as notified; ids already stored are left untouched."""
        unique_ids = sorted({str(p) for p in pig_ids if p})
        if not unique_ids:
            return
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise InfrastructureError(
                "Overdue birth notifications are not supported on this database",
                details={"dialect": dialect},
            )
        now = datetime.now(timezone.utc)
        stmt = (
            insert(OverdueBirthNotificationORM)
            .values(
                [
                    {"id": uuid4(), "farm_id": farm_id, "pig_id": pig_id, "notified_at": now}
                    for pig_id in unique_ids
                ]
            )
            .on_conflict_do_nothing(index_elements=["farm_id", "pig_id"])
        )
        try:
            await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to record overdue birth notifications") from exc

    async def discard(self, farm_id: UUID, pig_id: UUID) -> None:
        stmt = (
            delete(OverdueBirthNotificationORM)
            .where(OverdueBirthNotificationORM.farm_id == farm_id)
            .where(OverdueBirthNotificationORM.pig_id == str(pig_id))
        )
        await self.session.execute(stmt)
