from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime

from pigfarm.domain.services.subject import BreedingSubject
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.utils.dates import DateLike, try_parse_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MaturityVerdict:
    is_mature: bool
    reason: str


def age_in_months(
    birth_date: DateLike | None,
    now: datetime,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> float:
    """Age using a fixed average month length, not calendar months.

    Returns nan when the birth date is missing or cannot be read.
    """
    if birth_date is None:
        return math.nan
    birth = try_parse_instant(birth_date)
    if birth is None:
        logger.warning("Invalid birth_date: %r", birth_date)
        return math.nan
    return (now - birth) / config.average_month


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def is_mature(
    pig: BreedingSubject,
    now: datetime,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> MaturityVerdict:
    if not pig.birth_date:
        return MaturityVerdict(False, "Birth date not available")
    age = age_in_months(pig.birth_date, now, config)
    # nan fails the comparison, so unreadable birth dates are never mature
    if age >= config.min_breeding_age_months:
        return MaturityVerdict(True, "Pig is mature")
    if math.isnan(age):
        return MaturityVerdict(False, "Birth date could not be read")
    return MaturityVerdict(False, f"Pig is too young ({_round_half_up(age)} months)")
