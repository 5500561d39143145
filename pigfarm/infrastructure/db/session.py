from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pigfarm.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.pigs = None
        self.pens = None
        self.pen_transfers = None
        self.breeding_records = None
        self.health_records = None
        self.notified_births = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from pigfarm.infrastructure.repos.breeding_records_sqlalchemy import (
            BreedingRecordsSQLAlchemyRepository,
        )
        from pigfarm.infrastructure.repos.health_records_sqlalchemy import (
            HealthRecordsSQLAlchemyRepository,
        )
        from pigfarm.infrastructure.repos.notified_births_sqlalchemy import (
            NotifiedBirthsSQLAlchemyRepository,
        )
        from pigfarm.infrastructure.repos.pen_transfers_sqlalchemy import (
            PenTransfersSQLAlchemyRepository,
        )
        from pigfarm.infrastructure.repos.pens_sqlalchemy import PensSQLAlchemyRepository
        from pigfarm.infrastructure.repos.pigs_sqlalchemy import PigsSQLAlchemyRepository

        self.pigs = PigsSQLAlchemyRepository(self.session)
        self.pens = PensSQLAlchemyRepository(self.session)
        self.pen_transfers = PenTransfersSQLAlchemyRepository(self.session)
        self.breeding_records = BreedingRecordsSQLAlchemyRepository(self.session)
        self.health_records = HealthRecordsSQLAlchemyRepository(self.session)
        self.notified_births = NotifiedBirthsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.pigs = None
            self.pens = None
            self.pen_transfers = None
            self.breeding_records = None
            self.health_records = None
            self.notified_births = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
