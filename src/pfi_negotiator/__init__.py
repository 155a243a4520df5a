"""PFI negotiator: credential-gated offering eligibility and exchange status projection."""

__version__ = "0.1.0"
