from __future__ import annotations

from typing import Protocol

from pigfarm.application.interfaces.repositories.breeding_records import (
    BreedingRecordsRepository,
)
from pigfarm.application.interfaces.repositories.health_records import (
    HealthRecordsRepository,
)
from pigfarm.application.interfaces.repositories.notified_births import (
    NotifiedBirthsRepository,
)
from pigfarm.application.interfaces.repositories.pen_transfers import PenTransfersRepository
from pigfarm.application.interfaces.repositories.pens import PenRepository
from pigfarm.application.interfaces.repositories.pigs import PigRepository


class UnitOfWork(Protocol):
    pigs: PigRepository
    pens: PenRepository
    pen_transfers: PenTransfersRepository
    breeding_records: BreedingRecordsRepository
    health_records: HealthRecordsRepository
    notified_births: NotifiedBirthsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
