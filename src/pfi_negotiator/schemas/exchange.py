"""Derived exchange records and the option records for outbound messages.

ExchangeSummary is built fresh by domain/projection.py on every call and is
immutable. The Send*Options records are handed unchanged to the
MessageSender port; building and signing the actual messages is the
sender's job.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pfi_negotiator.domain.enums import ExchangeStatus


class ExchangeSummary(BaseModel):
    """Flattened, display-ready view of one exchange.

    `expiration_time` is only set when the latest message is a quote.
    Use `to_dict()` (or `exclude_unset=True`) so the key is absent otherwise.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    payin_amount: str | None
    payin_currency: str | None
    payout_amount: str | None
    payout_currency: str | None
    status: ExchangeStatus
    created_time: str
    expiration_time: str | None = None
    from_: str = Field(alias="from")
    to: str
    pfi_did: str

    @property
    def has_expiration(self) -> bool:
        return "expiration_time" in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) keys, omitting an unset expiry."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class _OptionsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SendRfqOptions(_OptionsModel):
    """Everything needed to open an exchange against an offering."""

    pfi_did: str
    offering_id: str
    payin_amount: str
    payin_kind: str
    payin_payment_details: dict[str, Any] = Field(default_factory=dict)
    payout_kind: str
    payout_payment_details: dict[str, Any] = Field(default_factory=dict)
    claims: list[str] = Field(default_factory=list)


class SendOrderOptions(_OptionsModel):
    pfi_did: str
    exchange_id: str


class SendCloseOptions(_OptionsModel):
    pfi_did: str
    exchange_id: str
    reason: str | None = None
