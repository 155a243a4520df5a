"""Adapters for the domain ports: HTTP clients and the JWT credential decoder."""

from pfi_negotiator.infrastructure.issuer_client import IssuerHttpClient
from pfi_negotiator.infrastructure.jwt_decoder import JwtCredentialDecoder
from pfi_negotiator.infrastructure.pfi_client import TbdexHttpClient

__all__ = [
    "IssuerHttpClient",
    "JwtCredentialDecoder",
    "TbdexHttpClient",
]
