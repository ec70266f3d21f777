"""Reflect API Simulator — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a {success: false, message} envelope
    - CORS configured from settings (not hardcoded)
    - No database, cache or chain client: every handler is pure

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Fault hooks mounted before the data routers and only when enabled,
      so production-like runs can switch them off via ENABLE_FAULT_HOOKS=false
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reflect_api.api.error_handlers import register_error_handlers
from reflect_api.api.routes import (
    health,
    protocol_activity,
    simulated_faults,
    stablecoin_market_data,
    stablecoin_transactions,
)
from reflect_api.config import get_settings
from reflect_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Reflect API simulator started (fault hooks "
        f"{'on' if settings.enable_fault_hooks else 'off'})",
    )
    yield
    logger.info("Reflect API simulator shutting down")


app = FastAPI(
    title="Reflect API Simulator", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
if settings.enable_fault_hooks:
    app.include_router(simulated_faults.router)
app.include_router(stablecoin_transactions.router)
app.include_router(stablecoin_market_data.router)
app.include_router(protocol_activity.stats_router)
app.include_router(protocol_activity.events_router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    uvicorn.run(
        "reflect_api.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )
