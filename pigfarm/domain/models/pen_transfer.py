from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class PenTransfer:
    id: UUID
    farm_id: UUID
    pig_id: UUID
    to_pen_id: UUID
    reason: str  # TransferReason
    from_pen_id: UUID | None = None
    notes: str | None = None
    transferred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        pig_id: UUID,
        to_pen_id: UUID,
        reason: str,
        from_pen_id: UUID | None = None,
        notes: str | None = None,
    ) -> PenTransfer:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            pig_id=pig_id,
            from_pen_id=from_pen_id,
            to_pen_id=to_pen_id,
            reason=reason,
            notes=notes,
        )
