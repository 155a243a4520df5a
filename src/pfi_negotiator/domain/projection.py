"""Exchange projection: ordered message list -> ExchangeSummary.

The rfq opens the exchange and is the source of its origin fields (creation
time, PFI, payout destination). The quote, when one exists, supplies the
priced amounts and currencies. The latest message decides the status.

Message order is trusted as given; nothing here re-sorts or validates the
protocol sequence.
"""

from __future__ import annotations

from decimal import Decimal, DecimalException, localcontext
from typing import TYPE_CHECKING, Any, TypeVar

from pfi_negotiator.domain.exceptions import (
    EmptyExchangeError,
    InvalidAmountError,
    MissingPrimaryMessageError,
)
from pfi_negotiator.domain.status import derive_status
from pfi_negotiator.schemas.exchange import ExchangeSummary
from pfi_negotiator.schemas.messages import Quote, Rfq

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pfi_negotiator.schemas.messages import Message, QuoteDetails

CUSTOMER_LABEL = "You"
UNKNOWN_RECIPIENT = "Unknown"

# Amounts beyond 10**30, below 10**-30 or with more digits are rejected
MAX_AMOUNT_EXPONENT = 30

_M = TypeVar("_M", Rfq, Quote)


def _first(messages: Sequence[Message], kind: type[_M]) -> _M | None:
    for message in messages:
        if isinstance(message, kind):
            return message
    return None


def _to_decimal(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except (DecimalException, TypeError, ValueError) as exc:
        raise InvalidAmountError(str(value)) from exc
    # NaN, Infinity and absurd exponents would not render as a plain number
    if (
        not amount.is_finite()
        or abs(amount.adjusted()) > MAX_AMOUNT_EXPONENT
        or len(amount.as_tuple().digits) > MAX_AMOUNT_EXPONENT
    ):
        raise InvalidAmountError(str(value))
    return amount


def _format_amount(amount: Decimal) -> str:
    """Render without exponent or trailing zeros: 105.50 -> '105.5'."""
    return format(amount.normalize(), "f")


def _payin_amount(rfq: Rfq, quote_payin: QuoteDetails | None) -> str | None:
    """Quoted payin (plus fee) as a normalized number, else the rfq's amount.

    Both quote branches go through Decimal, so "100.00" and "100.00" + "0"
    both render as "100". The rfq amount is passed through as requested.
    """
    if quote_payin is None or quote_payin.amount is None:
        return rfq.data.requested_payin_amount

    # wide enough that summing two bounded amounts never rounds
    with localcontext() as ctx:
        ctx.prec = 4 * MAX_AMOUNT_EXPONENT
        amount = _to_decimal(quote_payin.amount)
        if quote_payin.fee:
            fee = _to_decimal(quote_payin.fee)
            try:
                amount = amount + fee
            except DecimalException as exc:
                raise InvalidAmountError(f"{quote_payin.amount} + {quote_payin.fee}") from exc
        return _format_amount(amount)


def _payout_recipient(payment_details: dict[str, Any]) -> str:
    address = payment_details.get("address")
    if address:
        return str(address)

    account_parts = [
        str(value)
        for value in (
            payment_details.get("accountNumber"),
            payment_details.get("bankName"),
        )
        if value
    ]
    if account_parts:
        return ", ".join(account_parts)

    return UNKNOWN_RECIPIENT


def project_exchange(messages: Sequence[Message]) -> ExchangeSummary:
    """Derive the summary of one exchange from its ordered messages.

    Args:
        messages: All messages of a single exchange, oldest first.

    Returns:
        A new ExchangeSummary. `expiration_time` is only set when the latest
        message is a quote.

    Raises:
        EmptyExchangeError: If `messages` is empty.
        MissingPrimaryMessageError: If no rfq message is present.
        InvalidAmountError: If a quoted amount or fee is not numeric.
    """
    if not messages:
        raise EmptyExchangeError()

    latest = messages[-1]
    rfq = _first(messages, Rfq)
    if rfq is None:
        raise MissingPrimaryMessageError(latest.exchange_id)
    quote = _first(messages, Quote)

    quote_payin = quote.data.payin if quote is not None else None
    quote_payout = quote.data.payout if quote is not None else None

    fields: dict[str, Any] = {
        "id": latest.exchange_id,
        "payin_amount": _payin_amount(rfq, quote_payin),
        "payin_currency": quote_payin.currency_code if quote_payin else None,
        "payout_amount": quote_payout.amount if quote_payout else None,
        "payout_currency": quote_payout.currency_code if quote_payout else None,
        "status": derive_status(latest),
        "created_time": rfq.created_at,
        "from_": CUSTOMER_LABEL,
        "to": _payout_recipient(rfq.payout_payment_details),
        "pfi_did": rfq.metadata.to,
    }
    if isinstance(latest, Quote):
        fields["expiration_time"] = latest.data.expires_at

    return ExchangeSummary(**fields)


def project_exchanges(exchanges: Iterable[Sequence[Message]]) -> list[ExchangeSummary]:
    """Project a batch of exchanges. Output order follows input order."""
    return [project_exchange(messages) for messages in exchanges]
