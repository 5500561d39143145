from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pigfarm.config.settings import Settings, get_settings
from pigfarm.infrastructure.db.session import create_engine, create_session_factory
from pigfarm.infrastructure.scheduler.breeding_tasks import run_periodic_scan
from pigfarm.interfaces.http.deps import get_app_settings
from pigfarm.interfaces.http.routers import breeding, health_records, pens, pigs, transfers
from pigfarm.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    scan_task: asyncio.Task | None = None
    if settings.overdue_scan_interval > 0:
        scan_task = asyncio.create_task(
            run_periodic_scan(
                app.state.session_factory,
                interval_seconds=settings.overdue_scan_interval,
                config=app.state.breeding_config,
            )
        )
        logger.info("Overdue birth scan every %ds", settings.overdue_scan_interval)
    try:
        yield
    finally:
        if scan_task is not None:
            scan_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await scan_task
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Reloads must not stack handlers
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="PigFarm Backend",
        version="0.1.0",
        description="Herd and breeding management API for pig farms",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.breeding_config = settings.breeding_config()
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(pens.router)
    api.include_router(pigs.router)
    api.include_router(transfers.router)
    api.include_router(health_records.router)
    api.include_router(health_records.overview_router)
    api.include_router(breeding.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
