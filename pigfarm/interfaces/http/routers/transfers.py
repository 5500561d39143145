from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pigfarm.application.use_cases.pens import list_pig_transfers, transfer_pig
from pigfarm.domain.value_objects.breeding_config import BreedingConfig
from pigfarm.interfaces.http.deps import get_breeding_config, get_farm_id, get_uow
from pigfarm.interfaces.http.routers.pigs import to_pig_response
from pigfarm.interfaces.http.schemas.transfers import (
    PenTransferResponse,
    PigTransferCreate,
    PigTransferResult,
)

router = APIRouter(prefix="/pigs/{pig_id}", tags=["pens"])


@router.post(
    "/transfer", response_model=PigTransferResult, status_code=status.HTTP_201_CREATED
)
async def transfer_pig_endpoint(
    pig_id: UUID,
    payload: PigTransferCreate,
    farm_id: UUID = Depends(get_farm_id),
    config: BreedingConfig = Depends(get_breeding_config),
    uow=Depends(get_uow),
):
    """Move a pig to another pen."""
    result = await transfer_pig.execute(
        uow,
        farm_id,
        pig_id,
        transfer_pig.TransferPigInput(
            new_pen_id=payload.new_pen_id,
            reason=payload.transfer_reason,
            notes=payload.transfer_notes,
            version=payload.version,
        ),
    )
    return PigTransferResult(
        transfer=PenTransferResponse.model_validate(result.transfer),
        pig=to_pig_response(result.pig, config),
    )


@router.get("/transfers", response_model=list[PenTransferResponse])
async def list_transfers_endpoint(
    pig_id: UUID,
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
):
    transfers = await list_pig_transfers.execute(uow, farm_id, pig_id)
    return [PenTransferResponse.model_validate(t) for t in transfers]
