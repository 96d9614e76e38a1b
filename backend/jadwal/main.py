"""Jadwal API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JadwalError → {status, message} envelopes
    - CORS configured from settings (not hardcoded)
    - Database pool initialized and schema ensured on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema created on boot (idempotent create_all) instead of a migration tool
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jadwal.api.error_handlers import register_error_handlers
from jadwal.api.routes import checkin, schedule
from jadwal.config import get_settings
from jadwal.infrastructure.database import init_db
from jadwal.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle_seconds,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Jadwal API started")
    yield
    await manager.dispose()
    logger.info("Jadwal API shutting down")


app = FastAPI(title="Jadwal API", version="1.0.0", lifespan=lifespan)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(checkin.router)
app.include_router(schedule.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT (3030 by default)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "jadwal.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
