"""Credential REST API routes.

Routes:
    POST   /api/v1/credentials          Request a credential from the issuer
    POST   /api/v1/credentials/render   Display fields of a credential JWT
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pfi_negotiator.api.deps import get_credential_service
from pfi_negotiator.schemas.api import (
    CredentialIssueRequest,
    CredentialIssueResponse,
    RenderCredentialRequest,
)
from pfi_negotiator.schemas.credential import CredentialCard
from pfi_negotiator.services.credential_service import CredentialService

router = APIRouter(prefix="/api/v1/credentials", tags=["Credentials"])


@router.post(
    "",
    response_model=CredentialIssueResponse,
    status_code=201,
    summary="Request a credential from the issuer",
)
async def request_credential(
    request: CredentialIssueRequest,
    service: CredentialService = Depends(get_credential_service),
) -> CredentialIssueResponse:
    token = await service.request_credential(
        subject_did=request.subject_did,
        customer_name=request.customer_name,
        country=request.country,
    )
    return CredentialIssueResponse(credential=token)


@router.post(
    "/render",
    response_model=CredentialCard,
    summary="Render a credential for display",
)
async def render_credential(
    request: RenderCredentialRequest,
    service: CredentialService = Depends(get_credential_service),
) -> CredentialCard:
    return service.render(request.credential)
