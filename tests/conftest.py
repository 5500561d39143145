from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("OVERDUE_SCAN_INTERVAL", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from pigfarm.config.settings import Settings
from pigfarm.infrastructure.db.base import Base
from pigfarm.infrastructure.db.orm import (  # noqa: F401
    breeding_record,
    health_record,
    overdue_birth_notification,
    pen,
    pen_transfer,
    pig,
)
from pigfarm.interfaces.http.main import create_app


@pytest.fixture()
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def farm_headers(farm_id: UUID) -> dict[str, str]:
    return {"X-Farm-ID": str(farm_id)}


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "farm_header": "X-Farm-ID",
            "log_level": "INFO",
            "environment": "test",
            "overdue_scan_interval": 0,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()
