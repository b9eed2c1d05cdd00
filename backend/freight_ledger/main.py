"""Freight Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError → {"error", "code"} JSON responses
    - CORS configured from settings (not hardcoded)
    - Record store initialized on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Dashboard static files mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from freight_ledger.api.error_handlers import register_error_handlers
from freight_ledger.api.routes import auth, client_config, health, records
from freight_ledger.config import get_settings
from freight_ledger.infrastructure.observability import setup_logging
from freight_ledger.infrastructure.store_factory import close_store, init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = await init_store(settings)
    logger.info(
        f"Freight Ledger API started on port {settings.port}",
        extra={"backend": store.backend},
    )
    yield
    await close_store()
    logger.info("Freight Ledger API shutting down")


app = FastAPI(
    title="Freight Ledger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(client_config.router)
app.include_router(auth.router)
app.include_router(records.router)

register_error_handlers(app)

# html=True serves index.html for "/"
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
