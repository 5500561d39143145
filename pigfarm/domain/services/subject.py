from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from pigfarm.utils.dates import DateLike


class BreedingSubject(Protocol):
    """Read-only view of a pig as the breeding rules see it."""

    id: Any
    name: str
    gender: str
    pen_id: Any
    birth_date: DateLike | None
    is_pregnant: bool
    pregnancy_start_date: DateLike | None
    expected_birth_date: DateLike | None
    actual_birth_date: DateLike | None
    parent_male_id: Any
    parent_female_id: Any


def is_female(pig: BreedingSubject) -> bool:
    return str(getattr(pig.gender, "value", pig.gender)).lower() == "female"


def is_male(pig: BreedingSubject) -> bool:
    return str(getattr(pig.gender, "value", pig.gender)).lower() == "male"


def pen_label(pig: BreedingSubject, pen_names: Mapping[str, str] | None = None) -> str:
    if pig.pen_id is None or pig.pen_id == "":
        return "N/A"
    key = str(pig.pen_id)
    if pen_names and key in pen_names:
        return pen_names[key]
    return key
