from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from pigfarm.domain.services.lifecycle_alerts import AlertReport, generate_alerts
from pigfarm.domain.services.subject import BreedingSubject
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.domain.value_objects.notified_births import NotifiedBirths
from pigfarm.utils.dates import utcnow


def execute(
    pigs: Iterable[BreedingSubject],
    notified_ids: Iterable[str] = (),
    *,
    now: datetime | None = None,
    pen_names: Mapping[str, str] | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
) -> AlertReport:
    """Evaluate a caller-supplied snapshot; the caller keeps the notified ids."""
    return generate_alerts(
        pigs,
        now or utcnow(),
        notified=NotifiedBirths.of(notified_ids),
        config=config,
        pen_names=pen_names,
    )
