from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from pigfarm.application.interfaces.unit_of_work import UnitOfWork
from pigfarm.application.use_cases.pens.list_pens import pen_names
from pigfarm.domain.services.lifecycle_alerts import AlertReport, generate_alerts
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.utils.dates import utcnow

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    now: datetime | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> AlertReport:
    """Alerts for the farm's herd; newly overdue pigs are remembered per farm."""
    pigs = await uow.pigs.list(farm_id)
    notified = await uow.notified_births.load(farm_id)
    report = generate_alerts(
        pigs,
        now or utcnow(),
        notified=notified,
        config=config,
        pen_names=await pen_names(uow, farm_id),
    )
    if report.newly_overdue:
        await uow.notified_births.add(farm_id, [str(pig.id) for pig in report.newly_overdue])
        await uow.commit()
        logger.info(
            "Farm %s: %d pig(s) newly overdue for birth", farm_id, len(report.newly_overdue)
        )
    return report
