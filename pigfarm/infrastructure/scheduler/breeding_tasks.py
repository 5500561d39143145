from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from pigfarm.application.use_cases.breeding import farm_alerts
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.infrastructure.db.session import SQLAlchemyUnitOfWork
from pigfarm.utils.dates import utcnow

logger = logging.getLogger(__name__)


async def scan_overdue_births(
    session_factory,
    *,
    now: datetime | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> int:
    """Run the alert scan for every farm and remember newly overdue births.

    Returns the number of pigs newly flagged as overdue.
    """
    now = now or utcnow()
    flagged = 0
    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            farm_ids = await uow.pigs.list_farm_ids()
        for farm_id in farm_ids:
            try:
                async with SQLAlchemyUnitOfWork(session_factory) as uow:
                    report = await farm_alerts.execute(uow, farm_id, now=now, config=config)
            except Exception as exc:
                logger.error("Overdue birth scan failed for farm %s: %s", farm_id, exc)
                continue
            if report.newly_overdue:
                flagged += len(report.newly_overdue)
                for pig in report.newly_overdue:
                    logger.warning(
                        "Birth overdue: %s (%s) expected %s",
                        pig.name,
                        pig.tag,
                        pig.expected_birth_date,
                    )
        logger.info("Overdue birth scan: %d farms, %d newly overdue", len(farm_ids), flagged)
    except Exception as exc:
        logger.error("scan_overdue_births failed: %s", exc, exc_info=True)
    return flagged


async def run_periodic_scan(
    session_factory,
    *,
    interval_seconds: int,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> None:
    while True:
        await scan_overdue_births(session_factory, config=config)
        await asyncio.sleep(interval_seconds)
