from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pigfarm.application.errors import NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.value_objects.health import HealthEventType, HealthRecordStatus
from pigfarm.utils.dates import utcnow


@dataclass(slots=True)
class CreateHealthRecordInput:
    event_type: str = HealthEventType.CHECKUP.value
    occurred_on: date | None = None
    description: str | None = None
    next_due: date | None = None
    status: str = HealthRecordStatus.COMPLETED.value
    veterinarian: str | None = None
    notes: str | None = None


def validate_event_type(value: str) -> str:
    valid = [t.value for t in HealthEventType]
    normalized = (value or "").strip().lower()
    if normalized not in valid:
        raise ValidationError(f"Invalid health record type. Must be one of: {', '.join(valid)}")
    return normalized


def validate_status(value: str) -> str:
    # Overdue is derived from next_due and cannot be stored
    valid = [HealthRecordStatus.COMPLETED.value, HealthRecordStatus.PENDING.value]
    normalized = (value or "").strip().lower()
    if normalized not in valid:
        raise ValidationError(f"Invalid health record status. Must be one of: {', '.join(valid)}")
    return normalized


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    payload: CreateHealthRecordInput,
) -> HealthRecord:
    """Create a new health record for a pig."""
    event_type = validate_event_type(payload.event_type)
    status = validate_status(payload.status)
    occurred_on = payload.occurred_on or utcnow().date()
    if payload.next_due is not None and payload.next_due < occurred_on:
        raise ValidationError("next_due cannot be before the record date")
    if not await uow.pigs.get(farm_id, pig_id):
        raise NotFound("Pig not found")

    record = HealthRecord.create(
        farm_id=farm_id,
        pig_id=pig_id,
        event_type=event_type,
        occurred_on=occurred_on,
        description=payload.description,
        next_due=payload.next_due,
        status=status,
        veterinarian=payload.veterinarian,
        notes=payload.notes,
    )
    created = await uow.health_records.add(record)
    await uow.commit()
    return created
