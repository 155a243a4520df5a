"""Domain enumerations for the PFI negotiator.

These enums define the canonical message kinds and exchange statuses.
They carry no framework imports.
"""

import enum


class MessageKind(enum.StrEnum):
    """Kinds of tbdex messages that can appear in an exchange."""

    RFQ = "rfq"
    QUOTE = "quote"
    ORDER = "order"
    ORDER_STATUS = "orderstatus"
    CLOSE = "close"


class ExchangeStatus(enum.StrEnum):
    """Normalized lifecycle status of an exchange.

    The first four mirror the kind of the latest message. The last four are
    outcomes derived from the reason text of a closing message.
    See domain/status.py for the derivation rules.
    """

    RFQ = "rfq"
    QUOTE = "quote"
    ORDER = "order"
    ORDER_STATUS = "orderstatus"
    COMPLETED = "completed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    FAILED = "failed"
