"""TbdexHttpClient: reads offerings and exchanges from PFIs over HTTP.

PFIs are addressed by DID. Resolving a DID to its service endpoint is out of
scope, so the base URL of every PFI comes from settings.pfi_endpoints.

Endpoints:
    GET {base}/offerings   -> {"data": [offering, ...]}
    GET {base}/exchanges   -> {"data": [[message, ...], ...]}   (bearer auth)

Transport failures (connection refused, timeouts) are retried with
exponential backoff. HTTP error statuses and malformed payloads are not
retried. Every failure surfaces as PfiRequestError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pfi_negotiator.domain.exceptions import PfiNotConfiguredError, PfiRequestError
from pfi_negotiator.logging_config import get_logger
from pfi_negotiator.schemas.messages import parse_exchange
from pfi_negotiator.schemas.offering import Offering

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pfi_negotiator.config import Settings
    from pfi_negotiator.domain.ports import RequesterIdentity
    from pfi_negotiator.schemas.messages import Message

logger = get_logger(__name__)


class TbdexHttpClient:
    """PfiClient implementation over a shared httpx.AsyncClient."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        endpoints: Mapping[str, str],
        max_attempts: int = 3,
        retry_wait_seconds: float = 1.0,
    ) -> None:
        self._http = http
        self._endpoints = dict(endpoints)
        self._max_attempts = max_attempts
        self._retry_wait_seconds = retry_wait_seconds

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient, settings: Settings) -> TbdexHttpClient:
        return cls(
            http,
            endpoints=settings.pfi_endpoints,
            max_attempts=settings.http_max_attempts,
            retry_wait_seconds=settings.http_retry_wait_seconds,
        )

    def base_url(self, pfi_did: str) -> str:
        """Return the configured base URL for a PFI, without trailing slash."""
        try:
            return self._endpoints[pfi_did].rstrip("/")
        except KeyError:
            raise PfiNotConfiguredError(pfi_did) from None

    # ------------------------------------------------------------------
    # Offerings
    # ------------------------------------------------------------------

    async def get_offerings(self, pfi_did: str) -> list[Offering]:
        url = f"{self.base_url(pfi_did)}/offerings"
        items = await self._get_data(url)

        try:
            offerings = [Offering.model_validate(item) for item in items]
        except ValidationError as exc:
            logger.warning("pfi.malformed_offerings", pfi_did=pfi_did, error=str(exc))
            raise PfiRequestError(f"Malformed offerings from {pfi_did}: {exc}") from exc

        logger.debug("pfi.offerings_received", pfi_did=pfi_did, count=len(offerings))
        return offerings

    # ------------------------------------------------------------------
    # Exchanges
    # ------------------------------------------------------------------

    async def get_exchanges(
        self, pfi_did: str, requester: RequesterIdentity
    ) -> list[list[Message]]:
        url = f"{self.base_url(pfi_did)}/exchanges"
        token = await requester.bearer_token(pfi_did)
        items = await self._get_data(url, headers={"Authorization": f"Bearer {token}"})

        try:
            exchanges = [parse_exchange(messages) for messages in items]
        except ValidationError as exc:
            logger.warning("pfi.malformed_exchanges", pfi_did=pfi_did, error=str(exc))
            raise PfiRequestError(f"Malformed exchanges from {pfi_did}: {exc}") from exc

        logger.debug(
            "pfi.exchanges_received",
            pfi_did=pfi_did,
            requester=requester.did_uri,
            count=len(exchanges),
        )
        return exchanges

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._retry_wait_seconds, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.info(
                        "pfi.request_retry",
                        url=url,
                        attempt=attempt.retry_state.attempt_number,
                    )
                response = await self._http.get(url, headers=headers)
        return response

    async def _get_data(self, url: str, headers: dict[str, str] | None = None) -> list[Any]:
        """GET a tbdex list endpoint and return its `data` array."""
        try:
            response = await self._get(url, headers=headers)
        except httpx.TransportError as exc:
            logger.error("pfi.request_failed", url=url, error=str(exc))
            raise PfiRequestError(f"Could not reach {url}: {exc}") from exc

        if response.is_error:
            logger.error("pfi.error_status", url=url, status_code=response.status_code)
            raise PfiRequestError(
                f"{url} responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise PfiRequestError(f"{url} returned a non-JSON body") from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise PfiRequestError(f"{url} returned no 'data' list")
        return data
