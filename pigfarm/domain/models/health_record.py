from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pigfarm.domain.value_objects.health import HealthRecordStatus


@dataclass(slots=True)
class HealthRecord:
    id: UUID
    farm_id: UUID
    pig_id: UUID
    event_type: str  # HealthEventType
    occurred_on: date
    description: str | None = None
    next_due: date | None = None
    status: str = HealthRecordStatus.COMPLETED.value
    veterinarian: str | None = None
    notes: str | None = None
    completed_at: datetime | None = None

    # Audit fields
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def is_completed(self) -> bool:
        return self.status == HealthRecordStatus.COMPLETED.value

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        pig_id: UUID,
        event_type: str,
        occurred_on: date,
        description: str | None = None,
        next_due: date | None = None,
        status: str = HealthRecordStatus.COMPLETED.value,
        veterinarian: str | None = None,
        notes: str | None = None,
    ) -> HealthRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            pig_id=pig_id,
            event_type=event_type,
            occurred_on=occurred_on,
            description=description,
            next_due=next_due,
            status=status,
            veterinarian=veterinarian,
            notes=notes,
            completed_at=now if status == HealthRecordStatus.COMPLETED.value else None,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def complete(self) -> None:
        if self.is_completed:
            return
        self.status = HealthRecordStatus.COMPLETED.value
        self.completed_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
