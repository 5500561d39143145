from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from pigfarm.infrastructure.db.base import Base


class PenTransferORM(Base):
    __tablename__ = "pen_transfers"
    __table_args__ = (
        Index("ix_pen_transfers_farm_pig", "farm_id", "pig_id", "transferred_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    pig_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pigs.id"), nullable=False
    )
    from_pen_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pens.id"), nullable=True
    )
    to_pen_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pens.id"), nullable=False
    )
    reason: Mapped[str] = mapped_column(String(32), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    transferred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
