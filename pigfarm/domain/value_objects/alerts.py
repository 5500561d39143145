from __future__ import annotations

from enum import Enum


class AlertSeverity(str, Enum):
    DESTRUCTIVE = "destructive"  # urgent
    SECONDARY = "secondary"  # informational warning
    OUTLINE = "outline"  # informational neutral

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    AlertSeverity.DESTRUCTIVE: 0,
    AlertSeverity.SECONDARY: 1,
    AlertSeverity.OUTLINE: 2,
}


class AlertType(str, Enum):
    """Canonical alert type names shared with the dashboard."""

    PREGNANCY_NOTICED = "Pregnancy Noticed"
    NESTING_BOX_NEEDED = "Nesting Box Needed"
    BIRTH_EXPECTED = "Birth Expected"
    FOSTERING_NEEDED = "Fostering Needed"
    WEANING = "Weaning and Nesting Box Removal"
    BREEDING_READY = "Breeding Ready"
