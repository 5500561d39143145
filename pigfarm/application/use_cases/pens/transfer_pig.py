from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from pigfarm.application.errors import ConflictError, NotFound, ValidationError
from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.domain.models.pen_transfer import PenTransfer
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.value_objects.transfer_reason import TransferReason

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransferPigInput:
    new_pen_id: UUID
    reason: str
    notes: str | None = None
    version: int | None = None


@dataclass(slots=True)
class TransferPigResult:
    transfer: PenTransfer
    pig: Pig


def validate_reason(value: str) -> str:
    valid = [r.value for r in TransferReason]
    normalized = (value or "").strip().lower()
    if normalized not in valid:
        raise ValidationError(
            f"Invalid transfer reason. Must be one of: {', '.join(valid)}"
        )
    return normalized


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pig_id: UUID,
    payload: TransferPigInput,
) -> TransferPigResult:
    """Move a pig to another pen and keep the move in its transfer history."""
    reason = validate_reason(payload.reason)
    pig = await uow.pigs.get(farm_id, pig_id)
    if not pig:
        raise NotFound("Pig not found")
    if pig.pen_id == payload.new_pen_id:
        raise ValidationError("Pig is already in the selected pen")
    pen = await uow.pens.get(farm_id, payload.new_pen_id)
    if not pen:
        raise NotFound("Pen not found")

    expected_version = payload.version if payload.version is not None else pig.version
    updated = await uow.pigs.update(
        farm_id,
        pig_id,
        data={"pen_id": pen.id},
        expected_version=expected_version,
    )
    if not updated:
        raise ConflictError("Version mismatch while transferring pig")

    transfer = await uow.pen_transfers.add(
        PenTransfer.create(
            farm_id=farm_id,
            pig_id=pig_id,
            from_pen_id=pig.pen_id,
            to_pen_id=pen.id,
            reason=reason,
            notes=payload.notes,
        )
    )
    await uow.commit()
    logger.info("Pig %s moved to pen %s (%s)", pig.tag, pen.name, reason)
    return TransferPigResult(transfer=transfer, pig=updated)
