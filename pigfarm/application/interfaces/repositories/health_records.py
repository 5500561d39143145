from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pigfarm.domain.models.health_record import HealthRecord


class HealthRecordsRepository(Protocol):
    async def add(self, record: HealthRecord) -> HealthRecord: ...

    async def get(self, farm_id: UUID, record_id: UUID) -> HealthRecord | None: ...

    async def update(self, record: HealthRecord, *, expected_version: int) -> HealthRecord | None: ...

    async def list_by_pig(self, farm_id: UUID, pig_id: UUID) -> list[HealthRecord]: ...

    async def list_open(self, farm_id: UUID) -> list[HealthRecord]: ...

    async def delete(self, record: HealthRecord) -> None: ...
