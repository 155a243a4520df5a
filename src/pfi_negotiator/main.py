"""FastAPI application entry point for the PFI negotiator.

Lifecycle:
    1. Startup: initialize logging and the shared outbound HTTP client.
    2. Running: serve the REST API.
    3. Shutdown: close the HTTP client.

Run with:
    uv run uvicorn pfi_negotiator.main:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from pfi_negotiator import __version__
from pfi_negotiator.config import get_settings
from pfi_negotiator.logging_config import get_logger, setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle."""
    settings = get_settings()

    setup_logging(settings)
    logger = get_logger(__name__)
    logger.info("app.starting", pfis=settings.pfi_dids)

    from pfi_negotiator.infrastructure.http_client import close_http_client, init_http_client

    await init_http_client()
    logger.info("app.started", host=settings.app_host, port=settings.app_port)

    yield

    logger.info("app.shutting_down")
    await close_http_client()
    logger.info("app.stopped")


def create_app() -> FastAPI:
    """Application factory: creates and configures the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title="PFI Negotiator",
        description=(
            "Credential-gated offering eligibility and exchange status "
            "summaries for tbdex PFIs."
        ),
        version=__version__,
        lifespan=lifespan,
        debug=settings.app_debug,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    from pfi_negotiator.api.middleware import setup_middleware

    setup_middleware(app)

    from pfi_negotiator.api.routes.credentials import router as credentials_router
    from pfi_negotiator.api.routes.exchanges import router as exchanges_router
    from pfi_negotiator.api.routes.health import router as health_router
    from pfi_negotiator.api.routes.offerings import router as offerings_router

    app.include_router(health_router)
    app.include_router(offerings_router)
    app.include_router(exchanges_router)
    app.include_router(credentials_router)

    return app


# The app instance used by Uvicorn
app = create_app()
