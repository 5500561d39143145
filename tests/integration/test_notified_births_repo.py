from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from pigfarm.application.errors import InfrastructureError
from pigfarm.infrastructure.db.orm.overdue_birth_notification import OverdueBirthNotificationORM
from pigfarm.infrastructure.db.session import SQLAlchemyUnitOfWork
from pigfarm.infrastructure.repos.notified_births_sqlalchemy import (
    NotifiedBirthsSQLAlchemyRepository,
)


async def test_add_is_idempotent_across_units_of_work(app, client, farm_id):
    pig_id = str(uuid4())
    for _ in range(2):
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await uow.notified_births.add(farm_id, [pig_id, pig_id])
            await uow.commit()

    async with app.state.session_factory() as session:
        count = await session.scalar(
            select(func.count())
            .select_from(OverdueBirthNotificationORM)
            .where(OverdueBirthNotificationORM.farm_id == farm_id)
        )
    assert count == 1

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        notified = await uow.notified_births.load(farm_id)
    assert pig_id in notified


async def test_add_overlapping_units_of_work_do_not_conflict(app, client, farm_id):
    pig_id = str(uuid4())
    first = SQLAlchemyUnitOfWork(app.state.session_factory)
    second = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with first:
        await first.notified_births.load(farm_id)
        async with second:
            await second.notified_births.load(farm_id)
            await second.notified_births.add(farm_id, [pig_id])
            await second.commit()
        await first.notified_births.add(farm_id, [pig_id])
        await first.commit()

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        notified = await uow.notified_births.load(farm_id)
    assert notified.ids == frozenset({pig_id})


async def test_add_skips_empty_ids(app, client, farm_id):
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        await uow.notified_births.add(farm_id, ["", None])
        await uow.commit()
        notified = await uow.notified_births.load(farm_id)
    assert len(notified) == 0


async def test_add_rejects_unsupported_database():
    session = SimpleNamespace(get_bind=lambda: SimpleNamespace(dialect=SimpleNamespace(name="mysql")))
    repo = NotifiedBirthsSQLAlchemyRepository(session)
    with pytest.raises(InfrastructureError) as excinfo:
        await repo.add(uuid4(), ["7"])
    assert excinfo.value.details == {"dialect": "mysql"}
