"""IssuerHttpClient: requests credentials from a credential issuer.

The issuer exposes a single endpoint:

    GET {issuer_url}/vc?name=<customer name>&country=<ISO code>&did=<subject DID>

and answers with the credential JWT as plain text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pfi_negotiator.domain.exceptions import IssuerRequestError
from pfi_negotiator.logging_config import get_logger

if TYPE_CHECKING:
    from pfi_negotiator.config import Settings

logger = get_logger(__name__)


class IssuerHttpClient:
    """CredentialIssuer implementation over a shared httpx.AsyncClient."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        issuer_url: str,
        max_attempts: int = 3,
        retry_wait_seconds: float = 1.0,
    ) -> None:
        self._http = http
        self._issuer_url = issuer_url.rstrip("/")
        self._max_attempts = max_attempts
        self._retry_wait_seconds = retry_wait_seconds

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient, settings: Settings) -> IssuerHttpClient:
        return cls(
            http,
            issuer_url=settings.issuer_url,
            max_attempts=settings.http_max_attempts,
            retry_wait_seconds=settings.http_retry_wait_seconds,
        )

    async def request_credential(
        self, subject_did: str, customer_name: str, country: str
    ) -> str:
        """Ask the issuer for a credential and return the raw token."""
        url = f"{self._issuer_url}/vc"
        params = {"name": customer_name, "country": country, "did": subject_did}

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=self._retry_wait_seconds, max=10),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self._http.get(url, params=params)
        except httpx.TransportError as exc:
            logger.error("issuer.request_failed", url=url, error=str(exc))
            raise IssuerRequestError(f"Could not reach issuer at {url}: {exc}") from exc

        if response.is_error:
            logger.error("issuer.error_status", url=url, status_code=response.status_code)
            raise IssuerRequestError(
                f"Issuer responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        token = response.text.strip()
        if not token:
            raise IssuerRequestError("Issuer returned an empty credential")

        logger.info("issuer.credential_received", subject_did=subject_did)
        return token
