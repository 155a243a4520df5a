"""Tests for the OfferingService.

The PFI client is an AsyncMock; credentials are real JWTs decoded by the
JwtCredentialDecoder.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from pfi_negotiator.domain.exceptions import (
    CredentialDecodeError,
    MissingCredentialError,
    OfferingFetchError,
    PfiNotConfiguredError,
    PfiRequestError,
)
from pfi_negotiator.infrastructure.jwt_decoder import JwtCredentialDecoder
from pfi_negotiator.schemas.offering import Offering
from pfi_negotiator.services.offering_service import OfferingService

PFI = "did:dht:pfi-one"


def _offering(factory, fields, offering_id: str = "offering_01") -> Offering:
    return Offering.model_validate(factory(fields, offering_id))


def _service(client: AsyncMock) -> OfferingService:
    return OfferingService(client, JwtCredentialDecoder())


class TestFetchOfferings:
    @pytest.mark.asyncio
    async def test_returns_client_result(self, offering_factory) -> None:
        offerings = [_offering(offering_factory, None)]
        client = AsyncMock()
        client.get_offerings.return_value = offerings

        result = await _service(client).fetch_offerings(PFI)

        assert result == offerings
        client.get_offerings.assert_awaited_once_with(PFI)

    @pytest.mark.asyncio
    async def test_wraps_client_failure(self) -> None:
        client = AsyncMock()
        client.get_offerings.side_effect = PfiRequestError("boom", status_code=500)

        with pytest.raises(OfferingFetchError) as exc_info:
            await _service(client).fetch_offerings(PFI)

        assert exc_info.value.message == "Error fetching offerings: boom"
        assert isinstance(exc_info.value.__cause__, PfiRequestError)

    @pytest.mark.asyncio
    async def test_unconfigured_pfi_is_wrapped_too(self) -> None:
        client = AsyncMock()
        client.get_offerings.side_effect = PfiNotConfiguredError("did:dht:nobody")

        with pytest.raises(OfferingFetchError) as exc_info:
            await _service(client).fetch_offerings("did:dht:nobody")

        assert exc_info.value.message.startswith("Error fetching offerings: ")
        assert isinstance(exc_info.value.__cause__, PfiNotConfiguredError)

    @pytest.mark.asyncio
    async def test_fetch_from_many_keeps_order(self, offering_factory) -> None:
        by_pfi = {
            "did:dht:a": [_offering(offering_factory, None, "a1"), _offering(offering_factory, None, "a2")],
            "did:dht:b": [],
            "did:dht:c": [_offering(offering_factory, None, "c1")],
        }
        client = AsyncMock()
        client.get_offerings.side_effect = lambda did: by_pfi[did]

        result = await _service(client).fetch_offerings_from(["did:dht:c", "did:dht:b", "did:dht:a"])

        assert [o.id for o in result] == ["c1", "a1", "a2"]


class TestFilterEligible:
    def test_keeps_matching_offerings(self, offering_factory, kcc_fields, credential_factory) -> None:
        open_offering = _offering(offering_factory, None, "open")
        kcc_offering = _offering(offering_factory, kcc_fields, "kcc")
        other_issuer = _offering(
            offering_factory,
            [{"path": ["$.issuer"], "filter": {"const": "did:dht:someone-else"}}],
            "other",
        )
        service = _service(AsyncMock())

        eligible = service.filter_eligible(
            [open_offering, kcc_offering, other_issuer], [credential_factory()]
        )

        assert [o.id for o in eligible] == ["open", "kcc"]

    def test_only_first_credential_is_checked(
        self, offering_factory, kcc_fields, credential_factory
    ) -> None:
        offering = _offering(offering_factory, kcc_fields)
        wrong = credential_factory(types=["VerifiableCredential", "SanctionsCredential"])
        right = credential_factory()

        assert _service(AsyncMock()).filter_eligible([offering], [wrong, right]) == []

    def test_no_credentials(self, offering_factory) -> None:
        with pytest.raises(MissingCredentialError):
            _service(AsyncMock()).filter_eligible([_offering(offering_factory, None)], [])

    def test_no_offerings_needs_no_decoding(self) -> None:
        assert _service(AsyncMock()).filter_eligible([], ["not-a-jwt"]) == []

    def test_undecodable_credential_propagates(self, offering_factory) -> None:
        with pytest.raises(CredentialDecodeError):
            _service(AsyncMock()).filter_eligible([_offering(offering_factory, None)], ["garbage"])

    @pytest.mark.asyncio
    async def test_fetch_eligible(self, offering_factory, kcc_fields, credential_factory) -> None:
        client = AsyncMock()
        client.get_offerings.return_value = [
            _offering(offering_factory, kcc_fields, "kcc"),
            _offering(
                offering_factory,
                [{"path": ["$.type[*]"], "filter": {"const": "SanctionsCredential"}}],
                "sanctions",
            ),
        ]

        eligible = await _service(client).fetch_eligible_offerings(PFI, [credential_factory()])

        assert [o.id for o in eligible] == ["kcc"]
