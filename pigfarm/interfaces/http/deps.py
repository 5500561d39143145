from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import Request

from pigfarm.application.errors import ValidationError
from pigfarm.config.settings import Settings, get_settings
from pigfarm.domain.value_objects.breeding_config import BreedingConfig
from pigfarm.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_breeding_config(request: Request) -> BreedingConfig:
    config = getattr(request.app.state, "breeding_config", None)
    if config is None:
        raise RuntimeError("Breeding config not configured")
    return config


def get_farm_id(request: Request) -> UUID:
    header = get_app_settings(request).farm_header
    value = request.headers.get(header)
    if not value:
        raise ValidationError(f"Missing {header} header")
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValidationError("Invalid farm identifier") from exc
