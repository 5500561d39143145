from __future__ import annotations

from enum import Enum


class HealthEventType(str, Enum):
    VACCINATION = "vaccination"
    TREATMENT = "treatment"
    CHECKUP = "checkup"
    MEDICATION = "medication"
    SURGERY = "surgery"
    OTHER = "other"


class HealthRecordStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    # Derived only, never stored
    OVERDUE = "overdue"


class PigHealthStatus(str, Enum):
    GOOD = "good"
    UPCOMING = "upcoming"
    OVERDUE = "overdue"
