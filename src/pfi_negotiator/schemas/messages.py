"""tbdex message shapes and the Message tagged union.

An exchange is the ordered list of messages sharing one exchange id:

    rfq -> quote -> order -> orderstatus* -> close

The kind of a message lives in `metadata.kind` on the wire. `Message` is a
discriminated union over that key, so parsing a raw payload yields the
concrete class (Rfq, Quote, ...) and consumers can `match` on it
exhaustively.

Usage:
    exchange = parse_exchange(raw_messages)
    latest = exchange[-1]
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter, model_validator

from pfi_negotiator.domain.enums import MessageKind
from pfi_negotiator.schemas.base import WireModel

# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class MessageMetadata(WireModel):
    kind: MessageKind
    id: str
    exchange_id: str
    from_: str = Field(alias="from")
    to: str
    created_at: str
    protocol: str = "1.0"
    external_id: str | None = None


class _BaseMessage(WireModel):
    kind: ClassVar[MessageKind]

    metadata: MessageMetadata
    signature: str | None = None

    @model_validator(mode="after")
    def kind_matches_class(self) -> _BaseMessage:
        if self.metadata.kind != self.kind:
            raise ValueError(
                f"metadata.kind is '{self.metadata.kind}' but message is a '{self.kind}'"
            )
        return self

    @property
    def exchange_id(self) -> str:
        return self.metadata.exchange_id

    @property
    def created_at(self) -> str:
        return self.metadata.created_at


# ---------------------------------------------------------------------------
# RFQ
# ---------------------------------------------------------------------------


class SelectedPaymentMethod(WireModel):
    kind: str | None = None
    amount: str | None = None
    payment_details_hash: str | None = None


class RfqData(WireModel):
    offering_id: str | None = None
    payin: SelectedPaymentMethod | None = None
    payout: SelectedPaymentMethod | None = None
    claims_hash: str | None = None
    # Pre-1.0 RFQs carried the amount at the top level
    payin_amount: str | None = None

    @property
    def requested_payin_amount(self) -> str | None:
        if self.payin is not None and self.payin.amount is not None:
            return self.payin.amount
        return self.payin_amount


class PrivatePaymentMethod(WireModel):
    payment_details: dict[str, Any] | None = None


class RfqPrivateData(WireModel):
    salt: str | None = None
    payin: PrivatePaymentMethod | None = None
    payout: PrivatePaymentMethod | None = None
    claims: list[str] | None = None


class Rfq(_BaseMessage):
    kind: ClassVar[MessageKind] = MessageKind.RFQ

    data: RfqData = Field(default_factory=RfqData)
    private_data: RfqPrivateData | None = None

    @property
    def payout_payment_details(self) -> dict[str, Any]:
        if self.private_data is None or self.private_data.payout is None:
            return {}
        return self.private_data.payout.payment_details or {}


# ---------------------------------------------------------------------------
# Quote
# ---------------------------------------------------------------------------


class QuoteDetails(WireModel):
    currency_code: str | None = None
    amount: str | None = None
    fee: str | None = None
    payment_instruction: dict[str, Any] | None = None


class QuoteData(WireModel):
    expires_at: str | None = None
    payout_units_per_payin_unit: str | None = None
    payin: QuoteDetails | None = None
    payout: QuoteDetails | None = None


class Quote(_BaseMessage):
    kind: ClassVar[MessageKind] = MessageKind.QUOTE

    data: QuoteData = Field(default_factory=QuoteData)


# ---------------------------------------------------------------------------
# Order / OrderStatus / Close
# ---------------------------------------------------------------------------


class OrderData(WireModel):
    pass


class Order(_BaseMessage):
    kind: ClassVar[MessageKind] = MessageKind.ORDER

    data: OrderData = Field(default_factory=OrderData)


class OrderStatusData(WireModel):
    order_status: str | None = None
    status: str | None = None
    details: str | None = None


class OrderStatus(_BaseMessage):
    kind: ClassVar[MessageKind] = MessageKind.ORDER_STATUS

    data: OrderStatusData = Field(default_factory=OrderStatusData)


class CloseData(WireModel):
    reason: str | None = None
    success: bool | None = None


class Close(_BaseMessage):
    kind: ClassVar[MessageKind] = MessageKind.CLOSE

    data: CloseData = Field(default_factory=CloseData)


# ---------------------------------------------------------------------------
# Tagged union
# ---------------------------------------------------------------------------


def _message_kind(value: Any) -> str | None:
    """Read the discriminator from a raw payload or a parsed message."""
    if isinstance(value, dict):
        metadata = value.get("metadata")
        if isinstance(metadata, dict):
            kind = metadata.get("kind")
            return str(kind) if kind is not None else None
        return None
    kind = getattr(value, "kind", None)
    return str(kind) if kind is not None else None


Message = Annotated[
    Union[
        Annotated[Rfq, Tag(MessageKind.RFQ.value)],
        Annotated[Quote, Tag(MessageKind.QUOTE.value)],
        Annotated[Order, Tag(MessageKind.ORDER.value)],
        Annotated[OrderStatus, Tag(MessageKind.ORDER_STATUS.value)],
        Annotated[Close, Tag(MessageKind.CLOSE.value)],
    ],
    Discriminator(_message_kind),
]

_message_adapter: TypeAdapter[Message] = TypeAdapter(Message)
_exchange_adapter: TypeAdapter[list[Message]] = TypeAdapter(list[Message])


def parse_message(raw: dict[str, Any]) -> Message:
    """Parse one raw tbdex message into its concrete class."""
    return _message_adapter.validate_python(raw)


def parse_exchange(raw: list[dict[str, Any]]) -> list[Message]:
    """Parse the raw message list of one exchange, preserving order."""
    return _exchange_adapter.validate_python(raw)
