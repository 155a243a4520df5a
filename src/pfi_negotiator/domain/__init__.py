"""Domain layer: pure decision logic with no I/O and no logging.

The decision functions live in their own modules and are imported from
there (domain.matching, domain.status, domain.projection,
domain.credentials); they depend on the wire schemas, which in turn depend
on the enums exported here.
"""

from pfi_negotiator.domain.enums import ExchangeStatus, MessageKind
from pfi_negotiator.domain.exceptions import (
    CredentialDecodeError,
    MissingPrimaryMessageError,
    NegotiatorError,
)
from pfi_negotiator.domain.ports import (
    CredentialDecoder,
    CredentialIssuer,
    MessageSender,
    PfiClient,
    RequesterIdentity,
)

__all__ = [
    "ExchangeStatus",
    "MessageKind",
    "CredentialDecodeError",
    "MissingPrimaryMessageError",
    "NegotiatorError",
    "CredentialDecoder",
    "CredentialIssuer",
    "MessageSender",
    "PfiClient",
    "RequesterIdentity",
]
