from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from pigfarm.infrastructure.db.base import Base


class PigORM(Base):
    __tablename__ = "pigs"
    __table_args__ = (
        UniqueConstraint("farm_id", "tag", name="ux_pigs_farm_tag"),
        Index("ix_pigs_farm_gender", "farm_id", "gender"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    tag: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[str] = mapped_column(String(6), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    color: Mapped[str | None] = mapped_column(String(64), nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    pen_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pens.id"), nullable=True
    )

    # Parentage
    parent_male_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    parent_female_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    # Breeding state
    is_pregnant: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")
    pregnancy_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expected_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    mated_with: Mapped[str | None] = mapped_column(String(255), nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="active")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
