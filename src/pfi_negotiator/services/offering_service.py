"""Offering Service: fetch offerings from PFIs and filter them by eligibility.

Client failures are wrapped into OfferingFetchError with a fixed
"Error fetching offerings: ..." message. Eligibility decisions come from
domain/matching.py and are not wrapped: a credential that cannot be decoded
is a caller error and propagates as CredentialDecodeError.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from pfi_negotiator.domain.exceptions import OfferingFetchError, PfiRequestError
from pfi_negotiator.domain.matching import is_matching_offering
from pfi_negotiator.logging_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pfi_negotiator.domain.ports import CredentialDecoder, PfiClient
    from pfi_negotiator.schemas.offering import Offering

logger = get_logger(__name__)


class OfferingService:
    """Coordinates the PFI client and the eligibility matcher."""

    def __init__(self, client: PfiClient, decoder: CredentialDecoder) -> None:
        self._client = client
        self._decoder = decoder

    async def fetch_offerings(self, pfi_did: str) -> list[Offering]:
        """Fetch every offering a PFI advertises."""
        try:
            offerings = await self._client.get_offerings(pfi_did)
        except PfiRequestError as exc:
            logger.error("offerings.fetch_failed", pfi_did=pfi_did, error=exc.message)
            raise OfferingFetchError(exc) from exc

        logger.info("offerings.fetched", pfi_did=pfi_did, count=len(offerings))
        return offerings

    async def fetch_offerings_from(self, pfi_dids: Sequence[str]) -> list[Offering]:
        """Fetch offerings from several PFIs concurrently.

        Results keep the order of `pfi_dids`. The first failure aborts the batch.
        """
        batches = await asyncio.gather(*(self.fetch_offerings(did) for did in pfi_dids))
        return [offering for batch in batches for offering in batch]

    def filter_eligible(
        self, offerings: Sequence[Offering], credentials: Sequence[str]
    ) -> list[Offering]:
        """Keep the offerings the customer's first credential qualifies for."""
        eligible = [
            offering
            for offering in offerings
            if is_matching_offering(offering, credentials, self._decoder)
        ]
        logger.info(
            "offerings.filtered",
            total=len(offerings),
            eligible=len(eligible),
        )
        return eligible

    async def fetch_eligible_offerings(
        self, pfi_did: str, credentials: Sequence[str]
    ) -> list[Offering]:
        offerings = await self.fetch_offerings(pfi_did)
        return self.filter_eligible(offerings, credentials)
