"""Domain exceptions for the PFI negotiator.

These exceptions are framework-agnostic. They are caught and translated to
HTTP responses by the API layer's middleware.
"""


class NegotiatorError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, code: str = "NEGOTIATOR_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


# --- Credential Errors ---


class CredentialDecodeError(NegotiatorError):
    """Raised when a credential token cannot be decoded into a credential."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=f"Could not decode credential: {message}",
            code="CREDENTIAL_DECODE_ERROR",
        )


class MissingCredentialError(NegotiatorError):
    """Raised when an eligibility check is given no credential at all."""

    def __init__(self) -> None:
        super().__init__(
            message="At least one credential is required to check offering eligibility",
            code="MISSING_CREDENTIAL",
        )


# --- Exchange Errors ---


class EmptyExchangeError(NegotiatorError):
    """Raised when projecting an exchange that has no messages."""

    def __init__(self) -> None:
        super().__init__(
            message="Cannot summarize an exchange with no messages",
            code="EMPTY_EXCHANGE",
        )


class MissingPrimaryMessageError(NegotiatorError):
    """Raised when an exchange has no rfq message to read its origin from."""

    def __init__(self, exchange_id: str) -> None:
        super().__init__(
            message=f"Exchange {exchange_id} has no rfq message",
            code="MISSING_PRIMARY_MESSAGE",
        )
        self.exchange_id = exchange_id


class InvalidAmountError(NegotiatorError):
    """Raised when a quoted amount or fee is not a decimal number."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Invalid amount: {value!r}",
            code="INVALID_AMOUNT",
        )
        self.value = value


# --- PFI Client Errors ---


class PfiRequestError(NegotiatorError):
    """Raised when a call to a PFI fails (transport, HTTP status or payload)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message=message, code="PFI_REQUEST_ERROR")
        self.status_code = status_code


class PfiNotConfiguredError(PfiRequestError):
    """Raised when no base URL is configured for a PFI DID."""

    def __init__(self, pfi_did: str) -> None:
        super().__init__(message=f"No endpoint configured for PFI {pfi_did}")
        self.code = "PFI_NOT_CONFIGURED"
        self.pfi_did = pfi_did


# --- Service-level Fetch Errors ---


class FetchError(NegotiatorError):
    """Base for the descriptive wrappers raised by the service layer."""


class OfferingFetchError(FetchError):
    """Raised when offerings cannot be fetched from a PFI."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(
            message=f"Error fetching offerings: {cause}",
            code="OFFERING_FETCH_ERROR",
        )


class ExchangeFetchError(FetchError):
    """Raised when exchanges cannot be fetched from a PFI."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(
            message=f"Error fetching exchanges: {cause}",
            code="EXCHANGE_FETCH_ERROR",
        )


# --- Issuer Errors ---


class IssuerRequestError(NegotiatorError):
    """Raised when the credential issuer cannot be reached or refuses."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message=message, code="ISSUER_REQUEST_ERROR")
        self.status_code = status_code
