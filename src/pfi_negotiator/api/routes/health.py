"""Health check endpoint.

Reports whether the outbound HTTP pool is up and which PFIs are configured.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pfi_negotiator import __version__
from pfi_negotiator.api.deps import get_app_settings
from pfi_negotiator.config import Settings
from pfi_negotiator.infrastructure.http_client import is_http_client_ready
from pfi_negotiator.logging_config import get_logger
from pfi_negotiator.schemas.api import HealthResponse

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    http_status = "healthy" if is_http_client_ready() else "unavailable"
    if http_status != "healthy":
        logger.error("health.http_client_unavailable")

    return HealthResponse(
        status="ok" if http_status == "healthy" else "degraded",
        version=__version__,
        pfis=settings.pfi_dids,
        http_client=http_status,
    )
