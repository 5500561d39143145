from __future__ import annotations

import math
from datetime import timedelta

from pigfarm.domain.services.maturity import age_in_months, is_mature
from pigfarm.domain.value_objects.breeding_config import DEFAULT_BREEDING_CONFIG, BreedingConfig


def test_exactly_minimum_age_is_mature(now, make_pig):
    birth = now - 4 * DEFAULT_BREEDING_CONFIG.average_month
    verdict = is_mature(make_pig(birth_date=birth), now)
    assert verdict.is_mature
    assert verdict.reason == "Pig is mature"


def test_one_day_short_of_minimum_age_is_too_young(now, make_pig):
    birth = now - 4 * DEFAULT_BREEDING_CONFIG.average_month + timedelta(days=1)
    verdict = is_mature(make_pig(birth_date=birth), now)
    assert not verdict.is_mature
    assert verdict.reason == "Pig is too young (4 months)"


def test_young_pig_reports_rounded_age(now, make_pig):
    verdict = is_mature(make_pig(birth_date=now - timedelta(days=60)), now)
    assert verdict.reason == "Pig is too young (2 months)"


def test_missing_birth_date(now, make_pig):
    for missing in (None, ""):
        verdict = is_mature(make_pig(birth_date=missing), now)
        assert not verdict.is_mature
        assert verdict.reason == "Birth date not available"


def test_unreadable_birth_date_is_not_mature(now, make_pig, caplog):
    verdict = is_mature(make_pig(birth_date="sometime in spring"), now)
    assert not verdict.is_mature
    assert verdict.reason == "Birth date could not be read"
    assert "Invalid birth_date" in caplog.text


def test_age_in_months_uses_average_month(now):
    assert age_in_months(now - timedelta(days=30.42), now) == 1.0
    assert math.isnan(age_in_months(None, now))


def test_minimum_age_follows_config(now, make_pig):
    config = BreedingConfig(min_breeding_age_months=6)
    pig = make_pig(birth_date=now - timedelta(days=150))
    assert is_mature(pig, now).is_mature
    assert not is_mature(pig, now, config).is_mature
