"""Tests for credential display helpers."""

from __future__ import annotations

import locale

import pytest

from pfi_negotiator.domain.credentials import (
    format_medium_date,
    humanize_type,
    render_credential,
)
from pfi_negotiator.schemas.credential import VerifiableCredential


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("KnownCustomerCredential", "Known Customer Credential"),
        ("SanctionsCredential", "Sanctions Credential"),
        ("KYCCredential", "KYCCredential"),
        ("VerifiableCredential", "Verifiable Credential"),
        ("credential", "credential"),
    ],
)
def test_humanize_type(raw: str, expected: str) -> None:
    assert humanize_type(raw) == expected


class TestFormatMediumDate:
    def test_iso_timestamp(self) -> None:
        assert format_medium_date("2024-01-05T10:00:00Z") == "Jan 5, 2024"

    def test_plain_date(self) -> None:
        assert format_medium_date("2023-11-30") == "Nov 30, 2023"

    @pytest.mark.parametrize(
        ("month", "abbreviation"),
        [(1, "Jan"), (5, "May"), (9, "Sep"), (12, "Dec")],
    )
    def test_month_names(self, month: int, abbreviation: str) -> None:
        assert format_medium_date(f"2024-{month:02d}-15") == f"{abbreviation} 15, 2024"

    def test_ignores_process_locale(self) -> None:
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_medium_date("2024-03-09") == "Mar 9, 2024"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    @pytest.mark.parametrize("value", [None, "", "yesterday"])
    def test_unusable_values(self, value) -> None:
        assert format_medium_date(value) is None


def test_render_credential() -> None:
    credential = VerifiableCredential(
        type=["VerifiableCredential", "KnownCustomerCredential"],
        issuer="did:dht:issuer",
        credential_subject={"id": "did:dht:alice", "name": "Alice Doe", "country": "US"},
        issuance_date="2024-01-05T10:00:00Z",
    )
    card = render_credential(credential)

    assert card.title == "Known Customer Credential"
    assert card.name == "Alice Doe"
    assert card.country_code == "US"
    assert card.issuance_date == "Jan 5, 2024"
    assert card.model_dump(by_alias=True) == {
        "title": "Known Customer Credential",
        "name": "Alice Doe",
        "countryCode": "US",
        "issuanceDate": "Jan 5, 2024",
    }
