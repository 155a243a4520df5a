"""Exchange projection REST API routes.

Listing exchanges from a PFI needs a token signed with the customer's DID
key, which stays on the customer's side. The front-end fetches the raw
messages itself and posts them here for projection.

Routes:
    POST   /api/v1/exchanges/summaries   Summarize a batch of exchanges
    POST   /api/v1/exchanges/status      Status and label of one message
"""

from __future__ import annotations

from fastapi import APIRouter

from pfi_negotiator.domain.projection import project_exchanges
from pfi_negotiator.domain.status import derive_status, render_status_label
from pfi_negotiator.schemas.api import (
    ExchangeStatusRequest,
    ExchangeStatusResponse,
    ExchangeSummariesRequest,
)
from pfi_negotiator.schemas.exchange import ExchangeSummary

router = APIRouter(prefix="/api/v1/exchanges", tags=["Exchanges"])


@router.post(
    "/summaries",
    response_model=list[ExchangeSummary],
    response_model_exclude_unset=True,
    summary="Summarize exchanges from their ordered messages",
)
async def summarize_exchanges(request: ExchangeSummariesRequest) -> list[ExchangeSummary]:
    """Return one summary per exchange, in request order."""
    return project_exchanges(request.exchanges)


@router.post(
    "/status",
    response_model=ExchangeStatusResponse,
    summary="Derive the status a message implies",
)
async def message_status(request: ExchangeStatusRequest) -> ExchangeStatusResponse:
    status = derive_status(request.message)
    return ExchangeStatusResponse(status=status, label=render_status_label(status))
