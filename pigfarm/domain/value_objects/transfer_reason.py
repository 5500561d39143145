from __future__ import annotations

from enum import Enum


class TransferReason(str, Enum):
    QUARANTINE = "quarantine"
    CANNIBALISM_PREVENTION = "cannibalism_prevention"
    BREEDING_PROGRAM = "breeding_program"
    OVERCROWDING = "overcrowding"
    FACILITY_MAINTENANCE = "facility_maintenance"
    SOCIAL_GROUPING = "social_grouping"
    OTHER = "other"
