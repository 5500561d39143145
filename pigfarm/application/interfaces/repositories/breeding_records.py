from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pigfarm.domain.models.breeding_record import BreedingRecord


class BreedingRecordsRepository(Protocol):
    async def add(self, record: BreedingRecord) -> BreedingRecord: ...

    async def update(self, record: BreedingRecord) -> BreedingRecord: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[BreedingRecord]: ...

    async def get_open_for_sow(self, farm_id: UUID, sow_id: UUID) -> BreedingRecord | None: ...
