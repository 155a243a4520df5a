"""Display helpers for decoded credentials."""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from pfi_negotiator.schemas.credential import CredentialCard

if TYPE_CHECKING:
    from pfi_negotiator.schemas.credential import VerifiableCredential

# A capital that starts a capitalized word, not at the start of the string and
# not inside an acronym: "KnownCustomerCredential" -> "Known Customer Credential"
_WORD_BOUNDARY = re.compile(r"(?<=.)(?<![A-Z])[A-Z](?=[a-z])")

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def humanize_type(credential_type: str) -> str:
    return _WORD_BOUNDARY.sub(lambda match: f" {match.group(0)}", credential_type)


def format_medium_date(value: str | None) -> str | None:
    """Format an ISO-8601 timestamp in the en-US medium style, e.g. 'Jan 5, 2024'.

    The server has no notion of the viewer's locale, so the format is fixed;
    localized rendering is left to the front-end. Month names do not follow
    the process locale either.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return f"{_MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def render_credential(credential: VerifiableCredential) -> CredentialCard:
    """Extract the title, holder name, country and issuance date for display."""
    subject = credential.credential_subject
    return CredentialCard(
        title=humanize_type(credential.most_specific_type),
        name=subject.get("name"),
        country_code=subject.get("country"),
        issuance_date=format_medium_date(credential.issuance_date),
    )
