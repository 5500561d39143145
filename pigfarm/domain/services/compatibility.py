from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pigfarm.domain.services.maturity import is_mature
from pigfarm.domain.services.subject import BreedingSubject, pen_label
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig


@dataclass(frozen=True, slots=True)
class CompatibilityResult:
    compatible: bool
    reason: str


def _key(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def is_related(a: BreedingSubject, b: BreedingSubject) -> bool:
    """First-degree relatedness from recorded parents only.

    Catches parent/offspring and siblings sharing a recorded parent.
    Grandparents and cousins are not detected.
    """
    a_id, b_id = _key(a.id), _key(b.id)
    a_father, a_mother = _key(a.parent_male_id), _key(a.parent_female_id)
    b_father, b_mother = _key(b.parent_male_id), _key(b.parent_female_id)

    if b_id is not None and b_id in (a_father, a_mother):
        return True
    if a_id is not None and a_id in (b_father, b_mother):
        return True
    if a_father is not None and a_father == b_father:
        return True
    if a_mother is not None and a_mother == b_mother:
        return True
    return False


def check_compatibility(
    sow: BreedingSubject | None,
    boar: BreedingSubject | None,
    now: datetime,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> CompatibilityResult:
    """Decide whether `sow` may be bred with `boar`; the first failing rule wins."""
    if sow is None or boar is None:
        return CompatibilityResult(False, "Invalid selection")

    sow_maturity = is_mature(sow, now, config)
    if not sow_maturity.is_mature:
        return CompatibilityResult(
            False, f"Sow {sow.name} ({pen_label(sow)}): {sow_maturity.reason}"
        )

    boar_maturity = is_mature(boar, now, config)
    if not boar_maturity.is_mature:
        return CompatibilityResult(
            False, f"Boar {boar.name} ({pen_label(boar)}): {boar_maturity.reason}"
        )

    if is_related(sow, boar):
        return CompatibilityResult(False, "Potential inbreeding detected")

    if sow.is_pregnant:
        return CompatibilityResult(False, "Sow is currently pregnant")

    return CompatibilityResult(True, "Compatible for breeding")
