from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from pigfarm.domain.models.pig import Pig


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_pig():
    farm_id = uuid4()

    def factory(name: str = "Daisy", gender: str = "female", **kwargs) -> Pig:
        kwargs.setdefault("tag", name.upper())
        kwargs.setdefault("birth_date", "2023-01-01")
        kwargs.setdefault("id", uuid4())
        return Pig(farm_id=farm_id, name=name, gender=gender, **kwargs)

    return factory
