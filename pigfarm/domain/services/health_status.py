from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.value_objects.health import HealthRecordStatus, PigHealthStatus
from pigfarm.utils.dates import try_parse_instant

UPCOMING_WINDOW = timedelta(days=3)


def record_status(record: HealthRecord, now: datetime) -> HealthRecordStatus:
    """Stored status, promoted to overdue once an open record passes its due date."""
    if record.is_completed:
        return HealthRecordStatus.COMPLETED
    due = try_parse_instant(record.next_due)
    if due is not None and due < now:
        return HealthRecordStatus.OVERDUE
    return HealthRecordStatus.PENDING


def is_upcoming(record: HealthRecord, now: datetime) -> bool:
    if record.is_completed:
        return False
    due = try_parse_instant(record.next_due)
    return due is not None and now <= due <= now + UPCOMING_WINDOW


def pig_health_status(records: Iterable[HealthRecord], now: datetime) -> PigHealthStatus:
    """Overdue beats upcoming; a pig with neither is in good standing."""
    records = list(records)
    if any(record_status(r, now) is HealthRecordStatus.OVERDUE for r in records):
        return PigHealthStatus.OVERDUE
    if any(is_upcoming(r, now) for r in records):
        return PigHealthStatus.UPCOMING
    return PigHealthStatus.GOOD
