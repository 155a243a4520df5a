"""Credential Service: obtain credentials from the issuer and render them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pfi_negotiator.domain.credentials import render_credential
from pfi_negotiator.logging_config import get_logger

if TYPE_CHECKING:
    from pfi_negotiator.domain.ports import CredentialDecoder, CredentialIssuer
    from pfi_negotiator.schemas.credential import CredentialCard, VerifiableCredential

logger = get_logger(__name__)


class CredentialService:
    def __init__(self, issuer: CredentialIssuer, decoder: CredentialDecoder) -> None:
        self._issuer = issuer
        self._decoder = decoder

    async def request_credential(
        self, subject_did: str, customer_name: str, country: str
    ) -> str:
        """Request a credential for `subject_did` and return the token."""
        logger.info("credential.requested", subject_did=subject_did, country=country)
        return await self._issuer.request_credential(
            subject_did=subject_did,
            customer_name=customer_name,
            country=country,
        )

    def decode(self, token: str) -> VerifiableCredential:
        return self._decoder.decode(token)

    def render(self, token: str) -> CredentialCard:
        return render_credential(self.decode(token))
