from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from pigfarm.infrastructure.db.base import Base


class BreedingRecordORM(Base):
    __tablename__ = "breeding_records"
    __table_args__ = (
        Index("ix_breeding_records_farm_mating", "farm_id", "mating_date"),
        Index("ix_breeding_records_farm_sow", "farm_id", "sow_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pigs.id"), nullable=False
    )
    boar_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pigs.id"), nullable=True
    )
    sow_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    boar_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mating_date: Mapped[date] = mapped_column(Date, nullable=False)
    expected_birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    number_of_piglets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
