from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

from pigfarm.domain.services.compatibility import check_compatibility, is_related


def test_missing_partner_is_invalid_selection(now, make_pig):
    sow = make_pig()
    assert check_compatibility(sow, None, now).reason == "Invalid selection"
    assert check_compatibility(None, None, now).compatible is False


def test_young_sow_reason_names_the_sow_and_pen(now, make_pig):
    pen_id = uuid4()
    sow = make_pig("Rosie", birth_date=now - timedelta(days=60), pen_id=pen_id)
    boar = make_pig("Rex", gender="male")
    result = check_compatibility(sow, boar, now)
    assert not result.compatible
    assert result.reason == f"Sow Rosie ({pen_id}): Pig is too young (2 months)"


def test_boar_without_birth_date(now, make_pig):
    result = check_compatibility(make_pig(), make_pig("Rex", gender="male", birth_date=None), now)
    assert result.reason == "Boar Rex (N/A): Birth date not available"


def test_shared_father_is_inbreeding(now, make_pig):
    father = uuid4()
    sow = make_pig(parent_male_id=father)
    boar = make_pig("Rex", gender="male", parent_male_id=father)
    result = check_compatibility(sow, boar, now)
    assert result.compatible is False
    assert result.reason == "Potential inbreeding detected"


def test_shared_mother_is_inbreeding(now, make_pig):
    mother = uuid4()
    sow = make_pig(parent_female_id=mother)
    boar = make_pig("Rex", gender="male", parent_female_id=mother)
    assert is_related(sow, boar)
    result = check_compatibility(sow, boar, now)
    assert result.compatible is False
    assert result.reason == "Potential inbreeding detected"


def test_immaturity_is_reported_before_relatedness_and_pregnancy(now, make_pig):
    boar = make_pig("Rex", gender="male")
    sow = make_pig(
        birth_date=now - timedelta(days=60),
        is_pregnant=True,
        parent_male_id=boar.id,
    )
    result = check_compatibility(sow, boar, now)
    assert result.compatible is False
    assert result.reason == "Sow Daisy (N/A): Pig is too young (2 months)"


def test_inbreeding_is_reported_before_pregnancy(now, make_pig):
    boar = make_pig("Rex", gender="male")
    sow = make_pig(parent_male_id=boar.id, is_pregnant=True)
    assert check_compatibility(sow, boar, now).reason == "Potential inbreeding detected"


def test_pregnant_sow(now, make_pig):
    sow = make_pig(is_pregnant=True)
    result = check_compatibility(sow, make_pig("Rex", gender="male"), now)
    assert result.reason == "Sow is currently pregnant"


def test_compatible_pair(now, make_pig):
    result = check_compatibility(make_pig(), make_pig("Rex", gender="male"), now)
    assert result.compatible
    assert result.reason == "Compatible for breeding"


def test_unknown_parents_are_not_related(make_pig):
    a = make_pig()
    b = make_pig("Rex", gender="male")
    assert not is_related(a, b)


def test_parent_offspring_in_either_direction(make_pig):
    mother = make_pig("Mum")
    son = make_pig("Son", gender="male", parent_female_id=mother.id)
    assert is_related(mother, son)
    assert is_related(son, mother)


def test_relatedness_compares_ids_as_strings(make_pig):
    mother = make_pig("Mum")
    son = make_pig("Son", gender="male", parent_female_id=str(mother.id))
    assert is_related(son, mother)
