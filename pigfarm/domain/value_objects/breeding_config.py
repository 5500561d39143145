from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta


@dataclass(frozen=True, slots=True)
class BreedingConfig:
    """Timing parameters for maturity, gestation and litter care.

    Day counts are measured from the mating date (pregnancy start) or from
    the actual birth date; ages are in average-length months.
    """

    min_breeding_age_months: float = 4
    average_month_days: float = 30.42
    gestation_days: int = 114
    # Nesting box window [start, end) in days since mating
    nesting_box_start_day: int = 110
    nesting_box_end_day: int = 112
    weaning_days: int = 42
    post_weaning_breeding_delay_days: int = 7
    fostering_day: int = 20
    max_alerts: int = 15

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value!r}")
        if not (self.nesting_box_start_day < self.nesting_box_end_day <= self.gestation_days):
            raise ValueError(
                "nesting box window must satisfy start < end <= gestation_days"
            )
        if self.fostering_day >= self.weaning_days:
            raise ValueError("fostering_day must come before weaning_days")

    @property
    def average_month(self) -> timedelta:
        return timedelta(days=self.average_month_days)

    @property
    def cycle_days(self) -> int:
        """Gestation plus weaning: the shortest full breeding cycle."""
        return self.gestation_days + self.weaning_days

    @property
    def rebreed_after_birth_days(self) -> int:
        return self.weaning_days + self.post_weaning_breeding_delay_days


DEFAULT_BREEDING_CONFIG = BreedingConfig()
