"""FirmBox API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FirmboxError → callable error envelope
    - CORS configured from settings (not hardcoded)
    - One text client per process, created in the lifespan, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Client stored on app.state and injected via Depends: tests override the dependency
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from firmbox import __version__
from firmbox.api.error_handlers import register_error_handlers
from firmbox.api.routes import functions, health
from firmbox.config import get_settings
from firmbox.infrastructure.anthropic_client import AnthropicTextClient
from firmbox.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.text_client = AnthropicTextClient(
        api_key=settings.anthropic_api_key,
        timeout_seconds=settings.anthropic_timeout_seconds,
    )
    logger.info(
        "FirmBox API started",
        extra={"model": settings.generation_model},
    )
    yield
    await app.state.text_client.close()
    logger.info("FirmBox API shutting down")


app = FastAPI(title="FirmBox API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(functions.router)

register_error_handlers(app)
