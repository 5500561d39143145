from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pigfarm.application.use_cases.pens import create_pen, list_pens
from pigfarm.interfaces.http.deps import get_farm_id, get_uow
from pigfarm.interfaces.http.schemas.pens import PenCreate, PenResponse

router = APIRouter(prefix="/pens", tags=["pens"])


@router.post("", response_model=PenResponse, status_code=status.HTTP_201_CREATED)
async def create_pen_endpoint(
    payload: PenCreate,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    pen = await create_pen.execute(
        uow,
        farm_id,
        create_pen.CreatePenInput(
            name=payload.name,
            row_name=payload.row_name,
            capacity=payload.capacity,
        ),
    )
    return PenResponse.model_validate(pen)


@router.get("", response_model=list[PenResponse])
async def list_pens_endpoint(
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    return [PenResponse.model_validate(pen) for pen in await list_pens.execute(uow, farm_id)]
