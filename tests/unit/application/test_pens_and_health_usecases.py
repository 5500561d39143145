from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pigfarm.application.errors import ConflictError, NotFound, ValidationError
from pigfarm.application.use_cases.health import (
    complete_overdue_records,
    create_health_record,
    health_overview,
    update_health_record,
)
from pigfarm.application.use_cases.pens import transfer_pig
from pigfarm.domain.models.health_record import HealthRecord
from pigfarm.domain.models.pen import Pen
from pigfarm.domain.models.pig import Pig

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class StubPigs:
    def __init__(self, *pigs: Pig) -> None:
        self.items = {pig.id: pig for pig in pigs}
        self.updates: list[tuple[dict, int]] = []
        self.stale = False

    async def get(self, farm_id, pig_id):
        pig = self.items.get(pig_id)
        return replace(pig) if pig else None

    async def list(self, farm_id, **kwargs):
        return list(self.items.values())

    async def update(self, farm_id, pig_id, data, expected_version):
        if self.stale:
            return None
        self.updates.append((data, expected_version))
        pig = replace(self.items[pig_id], **data)
        pig.version = expected_version + 1
        self.items[pig_id] = pig
        return pig


class StubPens:
    def __init__(self, *pens: Pen) -> None:
        self.items = {pen.id: pen for pen in pens}

    async def get(self, farm_id, pen_id):
        return self.items.get(pen_id)


class StubTransfers:
    def __init__(self) -> None:
        self.added: list = []

    async def add(self, transfer):
        self.added.append(transfer)
        return transfer


class StubHealth:
    def __init__(self, *records: HealthRecord) -> None:
        self.items = {record.id: record for record in records}
        self.added: list[HealthRecord] = []
        self.updated: list[tuple[HealthRecord, int]] = []

    async def add(self, record):
        self.added.append(record)
        self.items[record.id] = record
        return record

    async def get(self, farm_id, record_id):
        record = self.items.get(record_id)
        return replace(record) if record else None

    async def update(self, record, *, expected_version):
        self.updated.append((record, expected_version))
        self.items[record.id] = record
        return record

    async def list_by_pig(self, farm_id, pig_id):
        return [replace(r) for r in self.items.values() if r.pig_id == pig_id]

    async def list_open(self, farm_id):
        return [r for r in self.items.values() if not r.is_completed and r.next_due]


def make_uow(pigs: StubPigs, pens: StubPens | None = None, health: StubHealth | None = None):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    return SimpleNamespace(
        pigs=pigs,
        pens=pens or StubPens(),
        pen_transfers=StubTransfers(),
        health_records=health or StubHealth(),
        commit=commit,
        commits=commits,
    )


def make_pig(name: str = "Daisy", **kwargs) -> Pig:
    return Pig(id=uuid4(), farm_id=uuid4(), tag=name.upper(), name=name, gender="female", **kwargs)


def make_record(pig: Pig, next_due: date | None, status: str = "pending") -> HealthRecord:
    return HealthRecord.create(
        farm_id=pig.farm_id,
        pig_id=pig.id,
        event_type="vaccination",
        occurred_on=date(2024, 5, 1),
        next_due=next_due,
        status=status,
    )


async def test_transfer_moves_pig_and_records_history():
    old_pen = Pen.create(farm_id=uuid4(), name="A1")
    new_pen = Pen.create(farm_id=uuid4(), name="B2")
    pig = make_pig(pen_id=old_pen.id)
    pigs = StubPigs(pig)
    uow = make_uow(pigs, StubPens(old_pen, new_pen))

    result = await transfer_pig.execute(
        uow,
        pig.farm_id,
        pig.id,
        transfer_pig.TransferPigInput(new_pen_id=new_pen.id, reason="Quarantine", notes="cough"),
    )
    assert result.pig.pen_id == new_pen.id
    assert pigs.updates == [({"pen_id": new_pen.id}, 1)]
    transfer = uow.pen_transfers.added[0]
    assert transfer.from_pen_id == old_pen.id
    assert transfer.to_pen_id == new_pen.id
    assert transfer.reason == "quarantine"
    assert transfer.notes == "cough"
    assert uow.commits


async def test_transfer_to_current_pen_is_rejected():
    pen = Pen.create(farm_id=uuid4(), name="A1")
    pig = make_pig(pen_id=pen.id)
    uow = make_uow(StubPigs(pig), StubPens(pen))
    with pytest.raises(ValidationError):
        await transfer_pig.execute(
            uow, pig.farm_id, pig.id, transfer_pig.TransferPigInput(new_pen_id=pen.id, reason="other")
        )
    assert not uow.pen_transfers.added


async def test_transfer_rejects_unknown_reason_and_pen():
    pig = make_pig()
    uow = make_uow(StubPigs(pig))
    with pytest.raises(ValidationError):
        await transfer_pig.execute(
            uow, pig.farm_id, pig.id, transfer_pig.TransferPigInput(new_pen_id=uuid4(), reason="boredom")
        )
    with pytest.raises(NotFound):
        await transfer_pig.execute(
            uow, pig.farm_id, pig.id, transfer_pig.TransferPigInput(new_pen_id=uuid4(), reason="other")
        )


async def test_transfer_conflict_on_stale_version():
    pen = Pen.create(farm_id=uuid4(), name="B2")
    pig = make_pig()
    pigs = StubPigs(pig)
    pigs.stale = True
    with pytest.raises(ConflictError):
        await transfer_pig.execute(
            make_uow(pigs, StubPens(pen)),
            pig.farm_id,
            pig.id,
            transfer_pig.TransferPigInput(new_pen_id=pen.id, reason="overcrowding", version=4),
        )


async def test_create_health_record_defaults_to_completed_checkup():
    pig = make_pig()
    health = StubHealth()
    record = await create_health_record.execute(
        make_uow(StubPigs(pig), health=health),
        pig.farm_id,
        pig.id,
        create_health_record.CreateHealthRecordInput(occurred_on=date(2024, 5, 1)),
    )
    assert record.event_type == "checkup"
    assert record.is_completed
    assert health.added == [record]


async def test_create_health_record_validates_input():
    pig = make_pig()
    uow = make_uow(StubPigs(pig))
    with pytest.raises(ValidationError):
        await create_health_record.execute(
            uow, pig.farm_id, pig.id, create_health_record.CreateHealthRecordInput(event_type="dental")
        )
    with pytest.raises(ValidationError):
        await create_health_record.execute(
            uow, pig.farm_id, pig.id, create_health_record.CreateHealthRecordInput(status="overdue")
        )
    with pytest.raises(ValidationError):
        await create_health_record.execute(
            uow,
            pig.farm_id,
            pig.id,
            create_health_record.CreateHealthRecordInput(
                occurred_on=date(2024, 5, 2), next_due=date(2024, 5, 1)
            ),
        )
    with pytest.raises(NotFound):
        await create_health_record.execute(
            uow, pig.farm_id, uuid4(), create_health_record.CreateHealthRecordInput()
        )


async def test_update_marks_record_completed():
    pig = make_pig()
    record = make_record(pig, date(2024, 5, 20))
    health = StubHealth(record)
    updated = await update_health_record.execute(
        make_uow(StubPigs(pig), health=health),
        pig.farm_id,
        pig.id,
        record.id,
        update_health_record.UpdateHealthRecordInput(status="completed"),
    )
    assert updated.is_completed
    assert updated.completed_at is not None
    assert health.updated[0][1] == 1
    assert updated.version == 2


async def test_update_rejects_record_of_another_pig_and_stale_version():
    pig = make_pig()
    record = make_record(pig, date(2024, 5, 20))
    uow = make_uow(StubPigs(pig), health=StubHealth(record))
    with pytest.raises(NotFound):
        await update_health_record.execute(
            uow, pig.farm_id, uuid4(), record.id, update_health_record.UpdateHealthRecordInput()
        )
    with pytest.raises(ConflictError):
        await update_health_record.execute(
            uow,
            pig.farm_id,
            pig.id,
            record.id,
            update_health_record.UpdateHealthRecordInput(version=5, notes="late"),
        )


async def test_complete_overdue_only_touches_overdue_records():
    pig = make_pig()
    overdue = make_record(pig, date(2024, 5, 20))
    upcoming = make_record(pig, date(2024, 6, 3))
    health = StubHealth(overdue, upcoming)
    completed = await complete_overdue_records.execute(
        make_uow(StubPigs(pig), health=health), pig.farm_id, pig.id, now=NOW
    )
    assert [r.id for r in completed] == [overdue.id]
    assert health.items[overdue.id].is_completed
    assert not health.items[upcoming.id].is_completed


async def test_health_overview_groups_pigs():
    sick = make_pig("Sick")
    soon = make_pig("Soon")
    fine = make_pig("Fine")
    health = StubHealth(
        make_record(sick, date(2024, 5, 20)),
        make_record(soon, date(2024, 6, 2)),
        make_record(fine, date(2024, 5, 20), status="completed"),
    )
    overview = await health_overview.execute(
        make_uow(StubPigs(sick, soon, fine), health=health), uuid4(), now=NOW
    )
    assert [entry.pig.name for entry in overview.overdue] == ["Sick"]
    assert [entry.pig.name for entry in overview.upcoming] == ["Soon"]
    assert overview.good_count == 1
