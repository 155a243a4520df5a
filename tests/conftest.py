"""Shared test fixtures for the PFI negotiator test suite.

Provides:
    - Factories for raw tbdex messages, offerings and credential JWTs
    - A ready-made rfq -> quote exchange
    - Async test support via pytest-asyncio
"""

from __future__ import annotations

from typing import Any

import jwt
import pytest

PFI_DID = "did:dht:pfi-one"
CUSTOMER_DID = "did:dht:alice"
ISSUER_DID = "did:dht:issuer"
EXCHANGE_ID = "rfq_01hzexchange"

# Signatures are never verified by the decoder; any HMAC key will do.
_SIGNING_KEY = "test-signing-key-not-used-for-verification"


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def build_message(
    kind: str,
    data: dict | None = None,
    private_data: dict | None = None,
    exchange_id: str = EXCHANGE_ID,
    created_at: str = "2024-01-01T00:00:00Z",
    sender: str | None = None,
    recipient: str | None = None,
) -> dict[str, Any]:
    """Return a raw (wire-format) tbdex message."""
    from_customer = kind in {"rfq", "order"} or (kind == "close" and sender == CUSTOMER_DID)
    message: dict[str, Any] = {
        "metadata": {
            "kind": kind,
            "id": f"{kind}_{exchange_id}_{created_at}",
            "exchangeId": exchange_id,
            "from": sender or (CUSTOMER_DID if from_customer else PFI_DID),
            "to": recipient or (PFI_DID if from_customer else CUSTOMER_DID),
            "createdAt": created_at,
            "protocol": "1.0",
        },
        "data": data or {},
        "signature": "sig",
    }
    if private_data is not None:
        message["privateData"] = private_data
    return message


@pytest.fixture
def message_factory():
    """Return the raw message builder."""
    return build_message


@pytest.fixture
def raw_rfq() -> dict[str, Any]:
    return build_message(
        "rfq",
        data={
            "offeringId": "offering_01",
            "payin": {"kind": "USD_BANK_TRANSFER", "amount": "100"},
            "payout": {"kind": "KES_MOBILE_MONEY"},
        },
        private_data={
            "payout": {"paymentDetails": {"address": "addr1"}},
        },
        created_at="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def raw_quote() -> dict[str, Any]:
    return build_message(
        "quote",
        data={
            "expiresAt": "2024-01-01",
            "payoutUnitsPerPayinUnit": "0.9",
            "payin": {"currencyCode": "USD", "amount": "100", "fee": "5"},
            "payout": {"currencyCode": "KES", "amount": "90"},
        },
        created_at="2024-01-01T00:01:00Z",
    )


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def build_credential_jwt(
    types: list[str] | None = None,
    issuer: str | None = ISSUER_DID,
    subject: dict | None = None,
    issuance_date: str = "2024-01-05T10:00:00Z",
    extra_claims: dict | None = None,
) -> str:
    """Encode a VC-JWT the way an issuer would (signature irrelevant here)."""
    vc: dict[str, Any] = {
        "@context": ["https://www.w3.org/2018/credentials/v1"],
        "type": types or ["VerifiableCredential", "KnownCustomerCredential"],
        "credentialSubject": subject
        if subject is not None
        else {"id": CUSTOMER_DID, "name": "Alice Doe", "country": "US"},
        "issuanceDate": issuance_date,
    }
    if issuer is not None:
        vc["issuer"] = issuer
    claims = {"vc": vc, "sub": CUSTOMER_DID, **(extra_claims or {})}
    return jwt.encode(claims, _SIGNING_KEY, algorithm="HS256")


@pytest.fixture
def credential_factory():
    """Return the VC-JWT builder."""
    return build_credential_jwt


# ---------------------------------------------------------------------------
# Offerings
# ---------------------------------------------------------------------------


def build_offering(fields: list[dict] | None, offering_id: str = "offering_01") -> dict[str, Any]:
    """Return a raw offering. `fields=None` means no requiredClaims at all."""
    data: dict[str, Any] = {
        "description": "USD to KES",
        "payoutUnitsPerPayinUnit": "0.9",
        "payin": {
            "currencyCode": "USD",
            "methods": [{"kind": "USD_BANK_TRANSFER"}],
        },
        "payout": {
            "currencyCode": "KES",
            "methods": [{"kind": "KES_MOBILE_MONEY", "estimatedSettlementTime": 3600}],
        },
    }
    if fields is not None:
        data["requiredClaims"] = {
            "id": "pd-kcc",
            "input_descriptors": [
                {"id": "kcc", "constraints": {"fields": fields}},
            ],
        }
    return {
        "metadata": {
            "kind": "offering",
            "from": PFI_DID,
            "id": offering_id,
            "createdAt": "2024-01-01T00:00:00Z",
            "protocol": "1.0",
        },
        "data": data,
        "signature": "sig",
    }


@pytest.fixture
def offering_factory():
    """Return the raw offering builder."""
    return build_offering


@pytest.fixture
def kcc_fields() -> list[dict]:
    """Constraints a KnownCustomerCredential from ISSUER_DID satisfies."""
    return [
        {"path": ["$.type[*]"], "filter": {"type": "string", "const": "KnownCustomerCredential"}},
        {"path": ["$.issuer"], "filter": {"type": "string", "const": ISSUER_DID}},
    ]
