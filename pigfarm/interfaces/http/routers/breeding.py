from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, status

from pigfarm.application.use_cases.breeding import (
    breeding_overview,
    check_compatibility,
    evaluate_alerts,
    farm_alerts,
    list_breeding_records,
    record_birth,
    schedule_breeding,
)
from pigfarm.domain.services.lifecycle_alerts import AlertReport
from pigfarm.domain.value_objects.breeding_config import BreedingConfig
from pigfarm.interfaces.http.deps import get_breeding_config, get_farm_id, get_uow
from pigfarm.interfaces.http.routers.pigs import to_pig_response
from pigfarm.interfaces.http.schemas.breeding import (
    AlertReportResponse,
    AlertResponse,
    BirthCreate,
    BirthResponse,
    BreedingCreate,
    BreedingOverviewResponse,
    BreedingRecordResponse,
    CompatibilityRequest,
    CompatibilityResponse,
    EvaluateAlertsRequest,
    OverduePigResponse,
    PregnantSowResponse,
)
from pigfarm.utils.dates import utcnow

router = APIRouter(prefix="/breeding", tags=["breeding"])


def _optional_str(value) -> str | None:
    return None if value is None else str(value)


def _to_report_response(report: AlertReport) -> AlertReportResponse:
    return AlertReportResponse(
        alerts=[
            AlertResponse(
                type=alert.type.value,
                message=alert.message,
                severity=alert.severity.value,
                pig_id=alert.pig_id,
            )
            for alert in report.alerts
        ],
        newly_overdue=[
            OverduePigResponse(
                id=str(pig.id),
                name=pig.name,
                tag=_optional_str(getattr(pig, "tag", None)),
                pen_id=_optional_str(pig.pen_id),
                expected_birth_date=_optional_str(pig.expected_birth_date),
            )
            for pig in report.newly_overdue
        ],
        notified_ids=sorted(report.notified.ids),
    )


def _as_utc(value: datetime | None) -> datetime:
    if value is None:
        return utcnow()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@router.post("/compatibility", response_model=CompatibilityResponse)
async def check_compatibility_endpoint(
    payload: CompatibilityRequest,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    result = await check_compatibility.execute(
        uow, farm_id, payload.sow_id, payload.boar_id, config=config
    )
    return CompatibilityResponse(compatible=result.compatible, reason=result.reason)


@router.post(
    "/records", response_model=BreedingRecordResponse, status_code=status.HTTP_201_CREATED
)
async def schedule_breeding_endpoint(
    payload: BreedingCreate,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    record = await schedule_breeding.execute(
        uow,
        farm_id,
        schedule_breeding.ScheduleBreedingInput(
            sow_id=payload.sow_id,
            boar_id=payload.boar_id,
            mating_date=payload.mating_date,
            notes=payload.notes,
        ),
        config=config,
    )
    return BreedingRecordResponse.model_validate(record)


@router.get("/records", response_model=list[BreedingRecordResponse])
async def list_breeding_records_endpoint(
    sow_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    records = await list_breeding_records.execute(
        uow, farm_id, sow_id=sow_id, limit=limit, offset=offset
    )
    return [BreedingRecordResponse.model_validate(record) for record in records]


@router.post("/births", response_model=BirthResponse, status_code=status.HTTP_201_CREATED)
async def record_birth_endpoint(
    payload: BirthCreate,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    result = await record_birth.execute(
        uow,
        farm_id,
        record_birth.RecordBirthInput(
            sow_id=payload.sow_id,
            actual_birth_date=payload.actual_birth_date,
            boar_id=payload.boar_id,
            piglets=[
                record_birth.PigletInput(**piglet.model_dump()) for piglet in payload.piglets
            ],
            number_of_piglets=payload.number_of_piglets,
            farm_name=payload.farm_name,
            notes=payload.notes,
        ),
        config=config,
    )
    now = utcnow()
    return BirthResponse(
        record=BreedingRecordResponse.model_validate(result.record),
        sow=to_pig_response(result.sow, config, now),
        piglets=[to_pig_response(piglet, config, now) for piglet in result.piglets],
    )


@router.get("/overview", response_model=BreedingOverviewResponse)
async def breeding_overview_endpoint(
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    now = utcnow()
    overview = await breeding_overview.execute(uow, farm_id, now=now, config=config)
    return BreedingOverviewResponse(
        available_sows=[to_pig_response(p, config, now) for p in overview.available_sows],
        available_boars=[to_pig_response(p, config, now) for p in overview.available_boars],
        pregnant_sows=[
            PregnantSowResponse(
                pig=to_pig_response(item.pig, config, now),
                days_to_birth=item.days_to_birth,
            )
            for item in overview.pregnant_sows
        ],
    )


@router.get("/alerts", response_model=AlertReportResponse)
async def farm_alerts_endpoint(
    as_of: datetime | None = None,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    report = await farm_alerts.execute(uow, farm_id, now=_as_utc(as_of), config=config)
    return _to_report_response(report)


@router.post("/alerts/evaluate", response_model=AlertReportResponse)
async def evaluate_alerts_endpoint(
    payload: EvaluateAlertsRequest,
    config: BreedingConfig = Depends(get_breeding_config),
):
    """Evaluate alerts for a herd snapshot without touching stored state."""
    report = evaluate_alerts.execute(
        payload.pigs,
        payload.notified_ids,
        now=payload.as_of or utcnow(),
        pen_names=payload.pen_names,
        config=config,
    )
    return _to_report_response(report)
