"""Service layer."""

from pfi_negotiator.services.credential_service import CredentialService
from pfi_negotiator.services.exchange_service import ExchangeService
from pfi_negotiator.services.offering_service import OfferingService

__all__ = ["CredentialService", "ExchangeService", "OfferingService"]
