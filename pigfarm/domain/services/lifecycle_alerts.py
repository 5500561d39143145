from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from pigfarm.domain.services.maturity import is_mature
from pigfarm.domain.services.subject import BreedingSubject, is_female, pen_label
from pigfarm.domain.value_objects.alerts import AlertSeverity, AlertType
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig
from pigfarm.domain.value_objects.notified_births import NotifiedBirths
from pigfarm.utils.dates import days_between, days_until, format_day, parse_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Alert:
    type: AlertType
    message: str
    severity: AlertSeverity
    pig_id: str | None = None


@dataclass(frozen=True, slots=True)
class AlertReport:
    alerts: list[Alert]
    newly_overdue: list[BreedingSubject]
    notified: NotifiedBirths = field(default_factory=NotifiedBirths)


def _birth_phrase(days_to_birth: int) -> str:
    if days_to_birth == 0:
        return "today"
    if days_to_birth > 0:
        return f"in {days_to_birth} days"
    return f"overdue by {abs(days_to_birth)} days"


class _PigAlerts:
    """Collects the alerts one pig contributes at `now`."""

    def __init__(
        self,
        pig: BreedingSubject,
        now: datetime,
        config: BreedingConfig,
        pen_names: Mapping[str, str] | None,
    ) -> None:
        self.pig = pig
        self.now = now
        self.config = config
        self.pig_id = str(pig.id) if pig.id is not None else None
        self.label = f"{pig.name} ({pen_label(pig, pen_names)})"
        self.alerts: list[Alert] = []
        self.overdue = False

    def _emit(self, alert_type: AlertType, text: str, severity: AlertSeverity) -> None:
        self.alerts.append(Alert(alert_type, f"{self.label} - {text}", severity, self.pig_id))

    def _parse(self, value, field_name: str, fallback: datetime | None = None) -> datetime:
        return parse_instant(
            value,
            fallback=fallback or self.now,
            field=field_name,
            owner=self.pig.name,
        )

    def pregnancy(self) -> None:
        pig, cfg = self.pig, self.config
        if not pig.is_pregnant:
            return
        if not pig.pregnancy_start_date:
            # TODO: decide whether a pregnant pig without a start date should alert at all
            logger.warning("Pregnant pig %s has no pregnancy_start_date", pig.name)
        start = self._parse(pig.pregnancy_start_date, "pregnancy_start_date")
        days_since_mating = days_between(start, self.now)

        if 0 <= days_since_mating < cfg.nesting_box_start_day:
            self._emit(
                AlertType.PREGNANCY_NOTICED,
                f"Confirmed pregnant since {format_day(start)}",
                AlertSeverity.SECONDARY,
            )

        if cfg.nesting_box_start_day <= days_since_mating < cfg.nesting_box_end_day:
            self._emit(
                AlertType.NESTING_BOX_NEEDED,
                f"Add nesting box, {days_since_mating} days since mating",
                AlertSeverity.SECONDARY,
            )

        if pig.expected_birth_date and not pig.actual_birth_date:
            expected = self._parse(
                pig.expected_birth_date,
                "expected_birth_date",
                fallback=self.now + timedelta(days=cfg.gestation_days),
            )
            days_to_birth = days_until(expected, self.now)
            if cfg.nesting_box_start_day <= days_since_mating <= cfg.gestation_days:
                self._emit(
                    AlertType.BIRTH_EXPECTED,
                    f"Expected to give birth {_birth_phrase(days_to_birth)}",
                    AlertSeverity.DESTRUCTIVE if days_to_birth <= 0 else AlertSeverity.SECONDARY,
                )
            self.overdue = days_to_birth < 0

    def litter(self) -> None:
        pig, cfg = self.pig, self.config
        if not pig.actual_birth_date:
            return
        birth = self._parse(pig.actual_birth_date, "actual_birth_date")
        days_since_birth = days_between(birth, self.now)

        if days_since_birth == cfg.fostering_day:
            self._emit(
                AlertType.FOSTERING_NEEDED,
                "Consider fostering piglets to other sows",
                AlertSeverity.SECONDARY,
            )
        if days_since_birth == cfg.weaning_days:
            self._emit(
                AlertType.WEANING,
                "Wean piglets and move to new pens, remove nesting box",
                AlertSeverity.SECONDARY,
            )

    def breeding_ready(self) -> None:
        pig, cfg, now = self.pig, self.config, self.now
        if not is_female(pig) or pig.is_pregnant:
            return
        if pig.pregnancy_start_date:
            start = self._parse(pig.pregnancy_start_date, "pregnancy_start_date")
            cycle_done = now > start + timedelta(days=cfg.cycle_days)
        else:
            cycle_done = True
        if pig.actual_birth_date:
            birth = self._parse(pig.actual_birth_date, "actual_birth_date")
            rested = now > birth + timedelta(days=cfg.rebreed_after_birth_days)
        else:
            rested = True
        if cycle_done and rested:
            self._emit(
                AlertType.BREEDING_READY,
                "Ready for next breeding cycle",
                AlertSeverity.OUTLINE,
            )


def generate_alerts(
    pigs: Iterable[BreedingSubject],
    now: datetime,
    notified: NotifiedBirths | None = None,
    config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
    pen_names: Mapping[str, str] | None = None,
) -> AlertReport:
    """Scan the herd and build the dashboard alert list.

    Alerts are ordered destructive, secondary, outline (stable within a
    severity) and truncated to `config.max_alerts`. Pigs overdue for birth
    that are not in `notified` are returned once in `newly_overdue`, and the
    returned `notified` state includes them. The input state is not mutated.
    """
    notified = notified or NotifiedBirths()
    alerts: list[Alert] = []
    newly_overdue: list[BreedingSubject] = []
    seen: set[str] = set()

    for pig in pigs:
        maturity = is_mature(pig, now, config)
        if not maturity.is_mature and is_female(pig):
            continue

        collector = _PigAlerts(pig, now, config, pen_names)
        collector.pregnancy()
        collector.litter()
        if maturity.is_mature:
            collector.breeding_ready()
        alerts.extend(collector.alerts)

        if not collector.overdue:
            continue
        key = collector.pig_id
        if not key:
            # Nothing to remember it by, so it is reported on every scan
            newly_overdue.append(pig)
        elif key not in notified and key not in seen:
            seen.add(key)
            newly_overdue.append(pig)

    alerts.sort(key=lambda alert: alert.severity.rank)
    return AlertReport(
        alerts=alerts[: config.max_alerts],
        newly_overdue=newly_overdue,
        notified=notified.with_ids(seen),
    )
