from __future__ import annotations

import math
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pigfarm.application.use_cases.pigs import (
    create_pig,
    delete_pig,
    get_pig,
    list_pigs,
    next_pig_tag,
    update_pig,
)
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.services.maturity import age_in_months, is_mature
from pigfarm.domain.value_objects.breeding_config import BreedingConfig
from pigfarm.interfaces.http.deps import get_breeding_config, get_farm_id, get_uow
from pigfarm.interfaces.http.schemas.pigs import (
    NextTagResponse,
    PigCreate,
    PigResponse,
    PigUpdate,
)
from pigfarm.utils.dates import utcnow

router = APIRouter(prefix="/pigs", tags=["pigs"])


def to_pig_response(pig: Pig, config: BreedingConfig, now: datetime | None = None) -> PigResponse:
    now = now or utcnow()
    data = PigResponse.model_validate(pig)
    age = age_in_months(pig.birth_date, now, config)
    verdict = is_mature(pig, now, config)
    data.age_in_months = None if math.isnan(age) else round(age, 1)
    data.is_mature = verdict.is_mature
    data.maturity_reason = verdict.reason
    return data


@router.post("", response_model=PigResponse, status_code=status.HTTP_201_CREATED)
async def create_pig_endpoint(
    payload: PigCreate,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    pig = await create_pig.execute(
        uow,
        farm_id,
        create_pig.CreatePigInput(**payload.model_dump()),
    )
    return to_pig_response(pig, config)


@router.get("", response_model=list[PigResponse])
async def list_pigs_endpoint(
    gender: str | None = None,
    pen_id: UUID | None = None,
    is_pregnant: bool | None = None,
    limit: int = 100,
    offset: int = 0,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    pigs = await list_pigs.execute(
        uow,
        farm_id,
        gender=gender,
        pen_id=pen_id,
        is_pregnant=is_pregnant,
        limit=limit,
        offset=offset,
    )
    now = utcnow()
    return [to_pig_response(pig, config, now) for pig in pigs]


@router.get("/next-tag", response_model=NextTagResponse)
async def next_tag_endpoint(
    farm_name: str | None = None,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    """Generate the next available tag for the farm."""
    return NextTagResponse(tag=await next_pig_tag.execute(uow, farm_id, farm_name))


@router.get("/{pig_id}", response_model=PigResponse)
async def get_pig_endpoint(
    pig_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    pig = await get_pig.execute(uow, farm_id, pig_id)
    return to_pig_response(pig, config)


@router.put("/{pig_id}", response_model=PigResponse)
async def update_pig_endpoint(
    pig_id: UUID,
    payload: PigUpdate,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    pig = await update_pig.execute(
        uow,
        farm_id,
        pig_id,
        update_pig.UpdatePigInput(**payload.model_dump()),
        config=config,
    )
    return to_pig_response(pig, config)


@router.delete("/{pig_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pig_endpoint(
    pig_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
) -> Response:
    await delete_pig.execute(uow, farm_id, pig_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
