from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pigfarm.application.use_cases.health import (
    complete_overdue_records,
    create_health_record,
    delete_health_record,
    health_overview,
    list_health_records,
    update_health_record,
)
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.services.health_status import record_status
from pigfarm.domain.value_objects.breeding_config import BreedingConfig
from pigfarm.interfaces.http.deps import get_breeding_config, get_farm_id, get_uow
from pigfarm.interfaces.http.routers.pigs import to_pig_response
from pigfarm.interfaces.http.schemas.health_records import (
    HealthOverviewResponse,
    HealthRecordCreate,
    HealthRecordListResponse,
    HealthRecordResponse,
    HealthRecordUpdate,
    PigHealthEntryResponse,
)
from pigfarm.utils.dates import utcnow

router = APIRouter(prefix="/pigs/{pig_id}/health", tags=["health"])
overview_router = APIRouter(prefix="/herd-health", tags=["health"])


def to_health_response(record: HealthRecord, now: datetime | None = None) -> HealthRecordResponse:
    data = HealthRecordResponse.model_validate(record)
    data.status = record_status(record, now or utcnow()).value
    return data


@router.post("", response_model=HealthRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_health_record_endpoint(
    pig_id: UUID,
    payload: HealthRecordCreate,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    """Create a new health record for a pig."""
    record = await create_health_record.execute(
        uow,
        farm_id,
        pig_id,
        create_health_record.CreateHealthRecordInput(
            event_type=payload.type,
            occurred_on=payload.date,
            description=payload.description,
            next_due=payload.next_due,
            status=payload.status,
            veterinarian=payload.veterinarian,
            notes=payload.notes,
        ),
    )
    return to_health_response(record)


@router.get("", response_model=HealthRecordListResponse)
async def list_health_records_endpoint(
    pig_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    """List health records for a pig."""
    now = utcnow()
    result = await list_health_records.execute(uow, farm_id, pig_id, now=now)
    return HealthRecordListResponse(
        items=[to_health_response(record, now) for record in result.items],
        health_status=result.status.value,
    )


@router.post("/complete-overdue", response_model=list[HealthRecordResponse])
async def complete_overdue_endpoint(
    pig_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    """Mark all overdue records of a pig as completed."""
    records = await complete_overdue_records.execute(uow, farm_id, pig_id)
    return [to_health_response(record) for record in records]


@router.put("/{record_id}", response_model=HealthRecordResponse)
async def update_health_record_endpoint(
    pig_id: UUID,
    record_id: UUID,
    payload: HealthRecordUpdate,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    """Update a health record."""
    record = await update_health_record.execute(
        uow,
        farm_id,
        pig_id,
        record_id,
        update_health_record.UpdateHealthRecordInput(
            version=payload.version,
            event_type=payload.type,
            occurred_on=payload.date,
            description=payload.description,
            next_due=payload.next_due,
            status=payload.status,
            veterinarian=payload.veterinarian,
            notes=payload.notes,
        ),
    )
    return to_health_response(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_health_record_endpoint(
    pig_id: UUID,
    record_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
) -> Response:
    await delete_health_record.execute(uow, farm_id, pig_id, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@overview_router.get("", response_model=HealthOverviewResponse)
async def health_overview_endpoint(
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    """Pigs with overdue or upcoming (3 days) health follow-ups."""
    now = utcnow()
    overview = await health_overview.execute(uow, farm_id, now=now)

    def entries(items: list[health_overview.PigHealthEntry]) -> list[PigHealthEntryResponse]:
        return [
            PigHealthEntryResponse(
                pig=to_pig_response(entry.pig, config, now),
                status=entry.status.value,
                open_records=[to_health_response(r, now) for r in entry.open_records],
            )
            for entry in items
        ]

    return HealthOverviewResponse(
        overdue=entries(overview.overdue),
        upcoming=entries(overview.upcoming),
        good_count=overview.good_count,
    )
