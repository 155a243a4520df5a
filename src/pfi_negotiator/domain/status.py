"""Exchange status derivation and display labels.

The status of an exchange is read off its latest message:

    rfq / quote / order / orderstatus  -> the message kind itself
    close                              -> outcome parsed from the close reason

Close reasons are free text, so the outcome is a case-insensitive substring
search. Rules are checked in order and the first hit wins, e.g.
"completed, not cancelled" resolves to COMPLETED.
"""

from __future__ import annotations

from typing import assert_never

from pfi_negotiator.domain.enums import ExchangeStatus
from pfi_negotiator.schemas.messages import (
    Close,
    Message,
    Order,
    OrderStatus,
    Quote,
    Rfq,
)

UNKNOWN_STATUS_LABEL = "Unknown status"

_CLOSE_REASON_RULES: tuple[tuple[tuple[str, ...], ExchangeStatus], ...] = (
    (("complete", "success"), ExchangeStatus.COMPLETED),
    (("expired",), ExchangeStatus.EXPIRED),
    (("cancelled",), ExchangeStatus.CANCELLED),
)

_STATUS_LABELS: dict[str, str] = {
    ExchangeStatus.RFQ: "Requested",
    ExchangeStatus.QUOTE: "Quoted",
    ExchangeStatus.ORDER: "Pending",
    ExchangeStatus.ORDER_STATUS: "Pending",
    ExchangeStatus.COMPLETED: "Completed",
    ExchangeStatus.EXPIRED: "Expired",
    ExchangeStatus.CANCELLED: "Cancelled",
    ExchangeStatus.FAILED: "Failed",
}


def status_from_close_reason(reason: str | None) -> ExchangeStatus:
    """Map a close reason to its outcome. A missing reason counts as failure."""
    text = (reason or "").lower()
    for needles, status in _CLOSE_REASON_RULES:
        if any(needle in text for needle in needles):
            return status
    return ExchangeStatus.FAILED


def derive_status(message: Message) -> ExchangeStatus:
    """Return the canonical status implied by a single message."""
    match message:
        case Close():
            return status_from_close_reason(message.data.reason)
        case Rfq() | Quote() | Order() | OrderStatus():
            return ExchangeStatus(message.kind)
        case _:
            assert_never(message)


def render_status_label(status: str) -> str:
    """Return the human-facing label for a status. Never fails."""
    try:
        return _STATUS_LABELS.get(status, UNKNOWN_STATUS_LABEL)
    except TypeError:
        # unhashable input
        return UNKNOWN_STATUS_LABEL


def render_message_status(message: Message) -> str:
    """Shortcut for the label of the status a message implies."""
    return render_status_label(derive_status(message))
