from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

from pigfarm.utils.dates import DateLike


@dataclass(slots=True)
class Pig:
    id: UUID
    farm_id: UUID
    tag: str
    name: str
    gender: str  # Gender
    breed: str | None = None
    color: str | None = None
    weight: float | None = None
    birth_date: DateLike | None = None
    pen_id: UUID | None = None

    # Parentage
    parent_male_id: UUID | None = None
    parent_female_id: UUID | None = None

    # Breeding state
    is_pregnant: bool = False
    pregnancy_start_date: DateLike | None = None
    expected_birth_date: DateLike | None = None
    actual_birth_date: DateLike | None = None
    mated_with: str | None = None

    status: str = "active"
    notes: str | None = None

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        tag: str,
        gender: str,
        name: str | None = None,
        breed: str | None = None,
        color: str | None = None,
        weight: float | None = None,
        birth_date: date | None = None,
        pen_id: UUID | None = None,
        parent_male_id: UUID | None = None,
        parent_female_id: UUID | None = None,
        notes: str | None = None,
    ) -> Pig:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            tag=tag,
            name=name or tag,
            gender=gender,
            breed=breed,
            color=color,
            weight=weight,
            birth_date=birth_date,
            pen_id=pen_id,
            parent_male_id=parent_male_id,
            parent_female_id=parent_female_id,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def start_pregnancy(self, mating_date: date, gestation_days: int, mated_with: str | None) -> None:
        self.is_pregnant = True
        self.pregnancy_start_date = mating_date
        self.expected_birth_date = mating_date + timedelta(days=gestation_days)
        self.mated_with = mated_with
        self.actual_birth_date = None
        self.bump_version()

    def give_birth(self, birth_date: date) -> None:
        self.is_pregnant = False
        self.pregnancy_start_date = None
        self.expected_birth_date = None
        self.actual_birth_date = birth_date
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
