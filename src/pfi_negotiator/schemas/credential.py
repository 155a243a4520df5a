"""Verifiable credential shapes.

VerifiableCredential is the decoded `vc` claim of a credential JWT. Only the
fields used for eligibility checks and display are typed; everything else is
kept as extra data.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pfi_negotiator.schemas.base import WireModel


class VerifiableCredential(WireModel):
    """A W3C verifiable credential (VC data model 1.1 field names)."""

    context: list[str] | str | None = Field(default=None, alias="@context")
    id: str | None = None
    type: list[str] = Field(..., min_length=1)
    issuer: str | None = None
    credential_subject: dict[str, Any] = Field(default_factory=dict)
    issuance_date: str | None = None
    expiration_date: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def wrap_single_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("issuer", mode="before")
    @classmethod
    def issuer_id_from_object(cls, value: Any) -> Any:
        # Issuers may be given as {"id": "did:...", "name": ...}
        if isinstance(value, dict):
            return value.get("id")
        return value

    @property
    def most_specific_type(self) -> str:
        return self.type[-1]


class CredentialCard(BaseModel):
    """Display-friendly projection of a credential."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title: str
    name: str | None = None
    country_code: str | None = None
    issuance_date: str | None = None
