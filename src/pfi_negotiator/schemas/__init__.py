"""Pydantic schemas: tbdex wire formats, derived records and API bodies."""

from pfi_negotiator.schemas.credential import CredentialCard, VerifiableCredential
from pfi_negotiator.schemas.exchange import (
    ExchangeSummary,
    SendCloseOptions,
    SendOrderOptions,
    SendRfqOptions,
)
from pfi_negotiator.schemas.messages import (
    Close,
    Message,
    Order,
    OrderStatus,
    Quote,
    Rfq,
    parse_exchange,
    parse_message,
)
from pfi_negotiator.schemas.offering import ConstraintField, Offering

__all__ = [
    "Close",
    "ConstraintField",
    "CredentialCard",
    "ExchangeSummary",
    "Message",
    "Offering",
    "Order",
    "OrderStatus",
    "Quote",
    "Rfq",
    "SendCloseOptions",
    "SendOrderOptions",
    "SendRfqOptions",
    "VerifiableCredential",
    "parse_exchange",
    "parse_message",
]
