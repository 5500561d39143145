from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pigfarm.domain.models.pig import Pig


class PigRepository(Protocol):
    async def add(self, pig: Pig) -> Pig: ...

    async def get(self, farm_id: UUID, pig_id: UUID) -> Pig | None: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        gender: str | None = None,
        pen_id: UUID | None = None,
        is_pregnant: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Pig]: ...

    async def list_tags(self, farm_id: UUID) -> list[str]: ...

    async def update(
        self,
        farm_id: UUID,
        pig_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Pig | None: ...

    async def save(self, pig: Pig, *, expected_version: int) -> Pig | None: ...

    async def delete(self, farm_id: UUID, pig_id: UUID) -> bool: ...

    async def list_farm_ids(self) -> list[UUID]: ...
