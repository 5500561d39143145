from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Pen:
    id: UUID
    farm_id: UUID
    name: str
    row_name: str | None = None
    capacity: int | None = None
    is_occupied: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        name: str,
        row_name: str | None = None,
        capacity: int | None = None,
    ) -> Pen:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            row_name=row_name,
            capacity=capacity,
        )
