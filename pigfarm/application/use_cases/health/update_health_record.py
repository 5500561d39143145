from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pigfarm.application.errors import ConflictError, NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.health.create_health_record import (
    validate_event_type,
    validate_status,
)
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.value_objects.health import HealthRecordStatus


@dataclass(slots=True)
class UpdateHealthRecordInput:
    version: int | None = None
    event_type: str | None = None
    occurred_on: date | None = None
    description: str | None = None
    next_due: date | None = None
    status: str | None = None
    veterinarian: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    record_id: UUID,
    payload: UpdateHealthRecordInput,
) -> HealthRecord:
    """Update a health record; sending status=completed marks it done."""
    record = await uow.health_records.get(farm_id, record_id)
    if not record or record.pig_id != pig_id:
        raise NotFound("Health record not found")
    expected_version = payload.version if payload.version is not None else record.version
    if expected_version != record.version:
        raise ConflictError("Version mismatch while updating health record")

    # Update fields (only if provided)
    if payload.event_type is not None:
        record.event_type = validate_event_type(payload.event_type)
    if payload.occurred_on is not None:
        record.occurred_on = payload.occurred_on
    if payload.description is not None:
        record.description = payload.description
    if payload.next_due is not None:
        record.next_due = payload.next_due
    if payload.veterinarian is not None:
        record.veterinarian = payload.veterinarian
    if payload.notes is not None:
        record.notes = payload.notes
    if record.next_due is not None and record.next_due < record.occurred_on:
        raise ValidationError("next_due cannot be before the record date")

    status = validate_status(payload.status) if payload.status is not None else None
    if status == HealthRecordStatus.COMPLETED.value and not record.is_completed:
        record.complete()
    else:
        if status is not None and status != record.status:
            record.status = status
            record.completed_at = None
        record.bump_version()

    updated = await uow.health_records.update(record, expected_version=expected_version)
    if not updated:
        raise ConflictError("Version mismatch while updating health record")
    await uow.commit()
    return updated
