"""Offering eligibility matching.

An offering lists required claim fields (Presentation Exchange constraints).
Only three field shapes are understood:

    $.credentialSubject.<claim>   the credential carries that claim
    $.issuer                      filter.const equals the credential issuer
    $.type[*]                     filter.const is one of the credential types

Eligibility is a cardinality check: every hit increments a counter, and the
customer qualifies when the counter equals the number of fields. A field
whose path lists several claims the credential carries counts once per claim,
so it can stand in for a field that found nothing. Existing offerings are
published against this behaviour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pfi_negotiator.domain.exceptions import MissingCredentialError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pfi_negotiator.domain.ports import CredentialDecoder
    from pfi_negotiator.schemas.credential import VerifiableCredential
    from pfi_negotiator.schemas.offering import ConstraintField, Offering

SUBJECT_PATH_PREFIX = "$.credentialSubject."
ISSUER_PATH = "$.issuer"
TYPE_PATH = "$.type[*]"


def count_claim_matches(
    fields: Sequence[ConstraintField], credential: VerifiableCredential
) -> int:
    """Count how many constraint hits a single credential produces."""
    matches = 0
    for field in fields:
        const = field.filter.const if field.filter is not None else None

        for key in credential.credential_subject:
            if f"{SUBJECT_PATH_PREFIX}{key}" in field.path:
                matches += 1

        if (
            ISSUER_PATH in field.path
            and credential.issuer
            and const is not None
            and const == credential.issuer
        ):
            matches += 1

        if (
            TYPE_PATH in field.path
            and credential.type
            and const is not None
            and str(const) in credential.type
        ):
            matches += 1

    return matches


def is_matching_offering(
    offering: Offering,
    credentials: Sequence[str],
    decoder: CredentialDecoder,
) -> bool:
    """Decide whether the customer's first credential satisfies the offering.

    Args:
        offering: The offering whose requiredClaims are checked.
        credentials: Credential tokens held by the customer. Only the first
            one is consulted.
        decoder: Turns the token into a VerifiableCredential.

    Raises:
        MissingCredentialError: If no credential is supplied.
        CredentialDecodeError: If the first token cannot be decoded.
    """
    if not credentials:
        raise MissingCredentialError()

    credential = decoder.decode(credentials[0])
    fields = offering.constraint_fields
    return count_claim_matches(fields, credential) == len(fields)
