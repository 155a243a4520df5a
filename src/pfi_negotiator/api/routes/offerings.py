"""Offering REST API routes.

Routes:
    GET    /api/v1/offerings?pfi_did=...           List a PFI's offerings
    POST   /api/v1/offerings/eligible?pfi_did=...  Offerings the customer qualifies for
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from pfi_negotiator.api.deps import get_offering_service
from pfi_negotiator.schemas.api import EligibilityRequest
from pfi_negotiator.schemas.offering import Offering
from pfi_negotiator.services.offering_service import OfferingService

router = APIRouter(prefix="/api/v1/offerings", tags=["Offerings"])


@router.get(
    "",
    response_model=list[Offering],
    summary="List a PFI's offerings",
)
async def list_offerings(
    pfi_did: str = Query(..., min_length=1, description="DID of the PFI"),
    service: OfferingService = Depends(get_offering_service),
) -> list[Offering]:
    return await service.fetch_offerings(pfi_did)


@router.post(
    "/eligible",
    response_model=list[Offering],
    summary="List the offerings the customer's credential qualifies for",
)
async def list_eligible_offerings(
    request: EligibilityRequest,
    pfi_did: str = Query(..., min_length=1, description="DID of the PFI"),
    service: OfferingService = Depends(get_offering_service),
) -> list[Offering]:
    return await service.fetch_eligible_offerings(pfi_did, request.credentials)
