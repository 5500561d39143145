from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pigfarm.application.errors import BreedingNotAllowed, ConflictError, NotFound, ValidationError
from pigfarm.application.use_cases.breeding import (
    check_compatibility,
    evaluate_alerts,
    farm_alerts,
    record_birth,
    schedule_breeding,
)
from pigfarm.domain.models.breeding_record import BreedingRecord
from pigfarm.domain.models.pig import Pig
from pigfarm.domain.value_objects.notified_births import NotifiedBirths

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class StubPigs:
    def __init__(self, *pigs: Pig) -> None:
        self.items = {pig.id: pig for pig in pigs}
        self.added: list[Pig] = []
        self.saved: list[tuple[Pig, int]] = []
        self.tags: list[str] = []
        self.stale = False

    async def get(self, farm_id, pig_id):
        pig = self.items.get(pig_id)
        return replace(pig) if pig else None

    async def list(self, farm_id, **kwargs):
        return list(self.items.values())

    async def list_tags(self, farm_id):
        return list(self.tags)

    async def add(self, pig):
        self.added.append(pig)
        self.items[pig.id] = pig
        return pig

    async def save(self, pig, *, expected_version):
        if self.stale:
            return None
        self.saved.append((pig, expected_version))
        self.items[pig.id] = pig
        return pig


class StubRecords:
    def __init__(self, open_record: BreedingRecord | None = None) -> None:
        self.open_record = open_record
        self.added: list[BreedingRecord] = []
        self.updated: list[BreedingRecord] = []

    async def add(self, record):
        self.added.append(record)
        return record

    async def update(self, record):
        self.updated.append(record)
        return record

    async def get_open_for_sow(self, farm_id, sow_id):
        return self.open_record


class StubNotified:
    def __init__(self, ids=()) -> None:
        self.state = NotifiedBirths.of(ids)
        self.added: list[str] = []
        self.discarded: list = []

    async def load(self, farm_id):
        return self.state

    async def add(self, farm_id, pig_ids):
        self.added.extend(pig_ids)

    async def discard(self, farm_id, pig_id):
        self.discarded.append(pig_id)


class StubPens:
    async def list(self, farm_id):
        return []


def make_uow(pigs: StubPigs, records: StubRecords | None = None, notified: StubNotified | None = None):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        pigs=pigs,
        pens=StubPens(),
        breeding_records=records or StubRecords(),
        notified_births=notified or StubNotified(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


def make_pig(name: str, gender: str, **kwargs) -> Pig:
    kwargs.setdefault("birth_date", date(2023, 1, 1))
    return Pig(id=uuid4(), farm_id=uuid4(), tag=name.upper(), name=name, gender=gender, **kwargs)


async def test_check_compatibility_rejects_swapped_genders():
    sow = make_pig("Daisy", "female")
    boar = make_pig("Rex", "male")
    uow = make_uow(StubPigs(sow, boar))
    swapped = await check_compatibility.execute(uow, uuid4(), boar.id, sow.id, now=NOW)
    assert swapped.reason == "Invalid selection"
    ok = await check_compatibility.execute(uow, uuid4(), sow.id, boar.id, now=NOW)
    assert ok.compatible


async def test_schedule_breeding_marks_sow_pregnant():
    sow = make_pig("Daisy", "female")
    boar = make_pig("Rex", "male")
    pigs = StubPigs(sow, boar)
    records = StubRecords()
    uow = make_uow(pigs, records)

    record = await schedule_breeding.execute(
        uow,
        uuid4(),
        schedule_breeding.ScheduleBreedingInput(
            sow_id=sow.id, boar_id=boar.id, mating_date=date(2024, 5, 1)
        ),
        now=NOW,
    )
    assert record.expected_birth_date == date(2024, 8, 23)
    assert record.boar_name == "Rex"
    assert record.notes == "Scheduled on 2024-05-01"
    saved, expected_version = pigs.saved[0]
    assert expected_version == 1
    assert saved.is_pregnant
    assert saved.mated_with == "Rex"
    assert saved.expected_birth_date == date(2024, 8, 23)
    assert uow.notified_births.discarded == [sow.id]
    assert uow.commits


async def test_schedule_breeding_refuses_pregnant_sow():
    sow = make_pig("Daisy", "female", is_pregnant=True)
    boar = make_pig("Rex", "male")
    pigs = StubPigs(sow, boar)
    uow = make_uow(pigs)
    with pytest.raises(BreedingNotAllowed) as excinfo:
        await schedule_breeding.execute(
            uow,
            uuid4(),
            schedule_breeding.ScheduleBreedingInput(sow_id=sow.id, boar_id=boar.id),
            now=NOW,
        )
    assert excinfo.value.details == {"reason": "Sow is currently pregnant"}
    assert not pigs.saved
    assert not uow.commits


async def test_schedule_breeding_conflict_on_stale_sow():
    sow = make_pig("Daisy", "female")
    boar = make_pig("Rex", "male")
    pigs = StubPigs(sow, boar)
    pigs.stale = True
    with pytest.raises(ConflictError):
        await schedule_breeding.execute(
            make_uow(pigs),
            uuid4(),
            schedule_breeding.ScheduleBreedingInput(sow_id=sow.id, boar_id=boar.id),
            now=NOW,
        )


async def test_record_birth_closes_open_record_and_tags_piglets():
    boar = make_pig("Rex", "male")
    sow = make_pig(
        "Daisy",
        "female",
        is_pregnant=True,
        pregnancy_start_date=date(2024, 2, 1),
        expected_birth_date=date(2024, 5, 25),
    )
    open_record = BreedingRecord.create(
        farm_id=sow.farm_id,
        sow_id=sow.id,
        boar_id=boar.id,
        mating_date=date(2024, 2, 1),
        gestation_days=114,
    )
    pigs = StubPigs(sow, boar)
    pigs.tags = ["GF-001"]
    records = StubRecords(open_record)
    notified = StubNotified([sow.id])
    uow = make_uow(pigs, records, notified)

    result = await record_birth.execute(
        uow,
        sow.farm_id,
        record_birth.RecordBirthInput(
            sow_id=sow.id,
            actual_birth_date=date(2024, 5, 26),
            farm_name="Green Fields",
            number_of_piglets=3,
            piglets=[
                record_birth.PigletInput(gender="female"),
                record_birth.PigletInput(gender="male", tag="CUSTOM-1"),
            ],
        ),
    )
    assert result.record is open_record
    assert open_record.actual_birth_date == date(2024, 5, 26)
    assert open_record.number_of_piglets == 3
    assert not records.added
    assert result.sow.is_pregnant is False
    assert result.sow.actual_birth_date == date(2024, 5, 26)
    assert [p.tag for p in result.piglets] == ["GF-002", "CUSTOM-1"]
    assert all(p.parent_female_id == sow.id for p in result.piglets)
    assert all(p.parent_male_id == boar.id for p in result.piglets)
    assert notified.discarded == [sow.id]


async def test_record_birth_without_schedule_backdates_mating():
    sow = make_pig("Daisy", "female")
    pigs = StubPigs(sow)
    records = StubRecords()
    result = await record_birth.execute(
        make_uow(pigs, records),
        sow.farm_id,
        record_birth.RecordBirthInput(sow_id=sow.id, actual_birth_date=date(2024, 5, 26)),
    )
    assert records.added == [result.record]
    assert result.record.mating_date == date(2024, 2, 2)
    assert result.record.number_of_piglets == 0


async def test_record_birth_validates_sow():
    boar = make_pig("Rex", "male")
    uow = make_uow(StubPigs(boar))
    with pytest.raises(NotFound):
        await record_birth.execute(
            uow,
            uuid4(),
            record_birth.RecordBirthInput(sow_id=uuid4(), actual_birth_date=date(2024, 5, 26)),
        )
    with pytest.raises(ValidationError):
        await record_birth.execute(
            uow,
            uuid4(),
            record_birth.RecordBirthInput(sow_id=boar.id, actual_birth_date=date(2024, 5, 26)),
        )


async def test_farm_alerts_persists_newly_overdue():
    sow = make_pig(
        "Daisy",
        "female",
        is_pregnant=True,
        pregnancy_start_date=date(2024, 2, 10),
        expected_birth_date=date(2024, 5, 29),
    )
    notified = StubNotified()
    uow = make_uow(StubPigs(sow), notified=notified)
    report = await farm_alerts.execute(uow, uuid4(), now=NOW)
    assert report.newly_overdue == [sow]
    assert notified.added == [str(sow.id)]
    assert uow.commits


async def test_farm_alerts_skips_already_notified():
    sow = make_pig(
        "Daisy",
        "female",
        is_pregnant=True,
        pregnancy_start_date=date(2024, 2, 10),
        expected_birth_date=date(2024, 5, 29),
    )
    notified = StubNotified([sow.id])
    uow = make_uow(StubPigs(sow), notified=notified)
    report = await farm_alerts.execute(uow, uuid4(), now=NOW)
    assert report.newly_overdue == []
    assert len(report.alerts) == 1
    assert not notified.added
    assert not uow.commits


def test_evaluate_alerts_uses_caller_state():
    sow = make_pig(
        "Daisy",
        "female",
        is_pregnant=True,
        pregnancy_start_date="2024-02-10",
        expected_birth_date="2024-05-29",
    )
    report = evaluate_alerts.execute([sow], [str(sow.id)], now=NOW)
    assert report.newly_overdue == []
    fresh = evaluate_alerts.execute([sow], now=NOW)
    assert fresh.newly_overdue == [sow]
    assert str(sow.id) in fresh.notified
