from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class BreedingRecord:
    id: UUID
    farm_id: UUID
    sow_id: UUID
    mating_date: date
    expected_birth_date: date
    boar_id: UUID | None = None
    sow_name: str | None = None
    boar_name: str | None = None
    actual_birth_date: date | None = None
    number_of_piglets: int | None = None
    notes: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def is_pregnant(self) -> bool:
        return self.actual_birth_date is None

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        sow_id: UUID,
        mating_date: date,
        gestation_days: int,
        boar_id: UUID | None = None,
        sow_name: str | None = None,
        boar_name: str | None = None,
        notes: str | None = None,
    ) -> BreedingRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            sow_id=sow_id,
            boar_id=boar_id,
            sow_name=sow_name,
            boar_name=boar_name,
            mating_date=mating_date,
            expected_birth_date=mating_date + timedelta(days=gestation_days),
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def record_birth(self, birth_date: date, number_of_piglets: int) -> None:
        self.actual_birth_date = birth_date
        self.number_of_piglets = number_of_piglets
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
