"""JwtCredentialDecoder: reads verifiable credentials out of VC-JWTs.

A VC-JWT carries the credential in its `vc` claim. Signatures are NOT
verified here: verification belongs to whoever issued or presented the
token, and this package only needs the claims for eligibility and display.
"""

from __future__ import annotations

from typing import Any

import jwt
from pydantic import ValidationError

from pfi_negotiator.domain.exceptions import CredentialDecodeError
from pfi_negotiator.schemas.credential import VerifiableCredential

VC_CLAIM = "vc"


class JwtCredentialDecoder:
    """CredentialDecoder backed by PyJWT."""

    def decode_claims(self, token: str) -> dict[str, Any]:
        """Return the raw JWT payload without verifying the signature."""
        try:
            return jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as exc:
            raise CredentialDecodeError(str(exc)) from exc

    def decode(self, token: str) -> VerifiableCredential:
        claims = self.decode_claims(token)

        vc = claims.get(VC_CLAIM)
        if not isinstance(vc, dict):
            raise CredentialDecodeError(f"token has no '{VC_CLAIM}' claim")

        # VC-JWTs may move the issuer into the registered `iss` claim
        if not vc.get("issuer") and claims.get("iss"):
            vc = {**vc, "issuer": claims["iss"]}

        try:
            return VerifiableCredential.model_validate(vc)
        except ValidationError as exc:
            raise CredentialDecodeError(str(exc)) from exc
