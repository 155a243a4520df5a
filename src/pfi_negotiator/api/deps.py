"""FastAPI dependency injection providers.

Used with Depends() in route handlers to inject configuration, the port
adapters and the services built on them. Tests swap any of these through
app.dependency_overrides.
"""

from __future__ import annotations

from fastapi import Depends

from pfi_negotiator.config import Settings, get_settings
from pfi_negotiator.infrastructure.http_client import get_http_client
from pfi_negotiator.infrastructure.issuer_client import IssuerHttpClient
from pfi_negotiator.infrastructure.jwt_decoder import JwtCredentialDecoder
from pfi_negotiator.infrastructure.pfi_client import TbdexHttpClient
from pfi_negotiator.services.credential_service import CredentialService
from pfi_negotiator.services.offering_service import OfferingService


def get_app_settings() -> Settings:
    """Provide the application settings."""
    return get_settings()


def get_credential_decoder() -> JwtCredentialDecoder:
    return JwtCredentialDecoder()


def get_pfi_client(settings: Settings = Depends(get_app_settings)) -> TbdexHttpClient:
    """Provide a PFI client bound to the shared HTTP connection pool."""
    return TbdexHttpClient.from_settings(get_http_client(), settings)


def get_credential_issuer(settings: Settings = Depends(get_app_settings)) -> IssuerHttpClient:
    return IssuerHttpClient.from_settings(get_http_client(), settings)


def get_offering_service(
    client: TbdexHttpClient = Depends(get_pfi_client),
    decoder: JwtCredentialDecoder = Depends(get_credential_decoder),
) -> OfferingService:
    return OfferingService(client, decoder)


def get_credential_service(
    issuer: IssuerHttpClient = Depends(get_credential_issuer),
    decoder: JwtCredentialDecoder = Depends(get_credential_decoder),
) -> CredentialService:
    return CredentialService(issuer, decoder)
