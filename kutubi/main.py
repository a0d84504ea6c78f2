"""Kutubi API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KutubiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One ResilientGeminiClient built on startup via lifespan, stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Gemini handle is NOT created on startup: a missing key must not stop the
      process, it surfaces as API_KEY_MISSING on first use
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kutubi.api.dependencies import build_gemini_client
from kutubi.api.error_handlers import register_error_handlers
from kutubi.api.routes import credential, documents, health
from kutubi.config import get_settings
from kutubi.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.gemini_client = build_gemini_client(settings)
    logger.info("Kutubi API started", extra={"model": settings.gemini_model})
    yield
    logger.info("Kutubi API shutting down")


app = FastAPI(
    title="Kutubi API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(credential.router)
app.include_router(documents.router)

register_error_handlers(app)
