from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from pigfarm.domain.value_objects.notified_births import NotifiedBirths


class NotifiedBirthsRepository(Protocol):
    """Per-farm record of pigs already surfaced as overdue for birth."""

    async def load(self, farm_id: UUID) -> NotifiedBirths: ...

    async def add(self, farm_id: UUID, pig_ids: Iterable[str]) -> None: ...

    async def discard(self, farm_id: UUID, pig_id: UUID) -> None: ...
