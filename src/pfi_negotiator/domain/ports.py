"""Ports: the narrow interfaces the core talks to the outside world through.

These are Protocols (structural subtyping), so adapters in infrastructure/
and test fakes only need to match the shape.

The domain layer has no imports from httpx, PyJWT or any network client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pfi_negotiator.schemas.credential import VerifiableCredential
    from pfi_negotiator.schemas.exchange import (
        SendCloseOptions,
        SendOrderOptions,
        SendRfqOptions,
    )
    from pfi_negotiator.schemas.messages import Message
    from pfi_negotiator.schemas.offering import Offering


@runtime_checkable
class CredentialDecoder(Protocol):
    """Turns an opaque credential token into its claims payload."""

    def decode(self, token: str) -> VerifiableCredential:
        """Decode a credential token.

        Raises:
            CredentialDecodeError: If the token cannot be parsed.
        """
        ...


@runtime_checkable
class RequesterIdentity(Protocol):
    """The customer on whose behalf exchanges are listed.

    Producing the bearer token means signing with the customer's DID key,
    which lives outside this package.
    """

    did_uri: str

    async def bearer_token(self, pfi_did: str) -> str: ...


@runtime_checkable
class PfiClient(Protocol):
    """Reads offerings and exchanges from a PFI.

    Implementations raise PfiRequestError for any transport, HTTP or
    payload failure.
    """

    async def get_offerings(self, pfi_did: str) -> list[Offering]: ...

    async def get_exchanges(
        self, pfi_did: str, requester: RequesterIdentity
    ) -> list[list[Message]]: ...


@runtime_checkable
class CredentialIssuer(Protocol):
    """Requests a credential token from an issuer."""

    async def request_credential(
        self, subject_did: str, customer_name: str, country: str
    ) -> str: ...


@runtime_checkable
class MessageSender(Protocol):
    """Builds, signs and submits exchange messages. Results are passed through."""

    async def send_rfq(self, options: SendRfqOptions) -> Any: ...

    async def send_order(self, options: SendOrderOptions) -> Any: ...

    async def send_close(self, options: SendCloseOptions) -> Any: ...
