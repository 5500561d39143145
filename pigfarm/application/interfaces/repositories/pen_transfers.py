from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pigfarm.domain.models.pen_transfer import PenTransfer


class PenTransfersRepository(Protocol):
    async def add(self, transfer: PenTransfer) -> PenTransfer: ...

    async def list_for_pig(self, farm_id: UUID, pig_id: UUID) -> list[PenTransfer]: ...
