from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pigfarm.domain.models.pen import Pen


class PenRepository(Protocol):
    async def add(self, pen: Pen) -> Pen: ...

    async def get(self, farm_id: UUID, pen_id: UUID) -> Pen | None: ...

    async def list(self, farm_id: UUID) -> list[Pen]: ...
