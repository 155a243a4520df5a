"""Exchange Service: list a customer's exchanges and forward new messages.

Fetching goes through the PfiClient port; failures are wrapped into
ExchangeFetchError ("Error fetching exchanges: ..."). Each fetched exchange
is then projected independently by domain/projection.py. Projection errors
(e.g. an exchange without an rfq) are precondition violations and are left
unwrapped.

Sending RFQs, orders and closes is delegated to a MessageSender; whatever it
returns is handed back to the caller untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pfi_negotiator.domain.exceptions import ExchangeFetchError, PfiRequestError
from pfi_negotiator.domain.projection import project_exchanges
from pfi_negotiator.logging_config import get_logger

if TYPE_CHECKING:
    from pfi_negotiator.domain.ports import MessageSender, PfiClient, RequesterIdentity
    from pfi_negotiator.schemas.exchange import (
        ExchangeSummary,
        SendCloseOptions,
        SendOrderOptions,
        SendRfqOptions,
    )

logger = get_logger(__name__)


class ExchangeService:
    """Coordinates the PFI client, the projector and the message sender."""

    def __init__(self, client: PfiClient, sender: MessageSender | None = None) -> None:
        self._client = client
        self._sender = sender

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def fetch_exchanges(
        self, pfi_did: str, requester: RequesterIdentity
    ) -> list[ExchangeSummary]:
        """Fetch the requester's exchanges with a PFI and summarize each one."""
        try:
            exchanges = await self._client.get_exchanges(pfi_did, requester)
        except PfiRequestError as exc:
            logger.error(
                "exchanges.fetch_failed",
                pfi_did=pfi_did,
                requester=requester.did_uri,
                error=exc.message,
            )
            raise ExchangeFetchError(exc) from exc

        summaries = project_exchanges(exchanges)
        logger.info("exchanges.fetched", pfi_did=pfi_did, count=len(summaries))
        return summaries

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def create_exchange(self, options: SendRfqOptions) -> Any:
        """Open a new exchange by sending an RFQ."""
        result = await self._require_sender().send_rfq(options)
        logger.info(
            "exchange.rfq_sent",
            pfi_did=options.pfi_did,
            offering_id=options.offering_id,
        )
        return result

    async def add_order(self, options: SendOrderOptions) -> Any:
        """Accept the quote of an exchange by sending an Order."""
        result = await self._require_sender().send_order(options)
        logger.info("exchange.order_sent", exchange_id=options.exchange_id)
        return result

    async def add_close(self, options: SendCloseOptions) -> Any:
        """Close an exchange, e.g. to cancel it before ordering."""
        result = await self._require_sender().send_close(options)
        logger.info(
            "exchange.close_sent",
            exchange_id=options.exchange_id,
            reason=options.reason,
        )
        return result

    def _require_sender(self) -> MessageSender:
        if self._sender is None:
            raise RuntimeError("ExchangeService was created without a MessageSender")
        return self._sender
