from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from pigfarm.infrastructure.db.base import Base


class OverdueBirthNotificationORM(Base):
    __tablename__ = "overdue_birth_notifications"
    __table_args__ = (
        UniqueConstraint("farm_id", "pig_id", name="ux_overdue_birth_farm_pig"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    pig_id: Mapped[str] = mapped_column(String(64), nullable=False)
    notified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
