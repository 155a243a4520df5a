"""Pydantic schemas for the REST API request/response bodies.

Kept separate from the wire-format models so the HTTP surface can change
without touching how PFI payloads are parsed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pfi_negotiator.domain.enums import ExchangeStatus
from pfi_negotiator.schemas.messages import Message

# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------


class EligibilityRequest(BaseModel):
    """Credentials the customer holds, as JWT tokens. Only the first is checked."""

    credentials: list[str] = Field(
        ...,
        min_length=1,
        description="Credential JWTs held by the customer",
    )


class ExchangeSummariesRequest(BaseModel):
    """Raw message lists, one per exchange, each in protocol order."""

    exchanges: list[list[Message]] = Field(
        ...,
        description="Ordered tbdex messages for each exchange",
    )


class ExchangeStatusRequest(BaseModel):
    message: Message = Field(..., description="Usually the latest message of an exchange")


class CredentialIssueRequest(BaseModel):
    subject_did: str = Field(..., min_length=1, description="DID the credential is issued to")
    customer_name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=2, max_length=2, examples=["US"])


class RenderCredentialRequest(BaseModel):
    credential: str = Field(..., min_length=1, description="Credential JWT")


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------


class ExchangeStatusResponse(BaseModel):
    status: ExchangeStatus
    label: str


class CredentialIssueResponse(BaseModel):
    credential: str


class HealthResponse(BaseModel):
    """Response for the health check endpoint."""

    status: str
    version: str
    pfis: list[str]
    http_client: str
