"""tbdex Offering shapes.

An offering advertises a payin/payout currency pair and, through
`requiredClaims`, the credentials a customer must hold to trade it.
`requiredClaims` is a Presentation Exchange presentation definition; only
the first input descriptor is used for eligibility.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pfi_negotiator.schemas.base import WireModel


class FieldFilter(WireModel):
    """JSON Schema fragment constraining the value found at a field's path."""

    type: str | None = None
    const: Any = None
    pattern: str | None = None


class ConstraintField(WireModel):
    """One required claim: JSONPath expressions plus an optional filter."""

    id: str | None = None
    path: list[str]
    filter: FieldFilter | None = None
    purpose: str | None = None

    @field_validator("path", mode="before")
    @classmethod
    def wrap_single_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class Constraints(WireModel):
    fields: list[ConstraintField] = Field(default_factory=list)


class InputDescriptor(WireModel):
    id: str
    constraints: Constraints = Field(default_factory=Constraints)


class PresentationDefinition(WireModel):
    id: str
    input_descriptors: list[InputDescriptor] = Field(
        default_factory=list, alias="input_descriptors"
    )


class PayinMethod(WireModel):
    kind: str
    required_payment_details: dict[str, Any] | None = None
    fee: str | None = None
    min: str | None = None
    max: str | None = None


class PayoutMethod(WireModel):
    kind: str
    estimated_settlement_time: int | None = None
    required_payment_details: dict[str, Any] | None = None
    fee: str | None = None
    min: str | None = None
    max: str | None = None


class OfferingPayin(WireModel):
    currency_code: str
    min: str | None = None
    max: str | None = None
    methods: list[PayinMethod] = Field(default_factory=list)


class OfferingPayout(WireModel):
    currency_code: str
    min: str | None = None
    max: str | None = None
    methods: list[PayoutMethod] = Field(default_factory=list)


class OfferingData(WireModel):
    description: str = ""
    payout_units_per_payin_unit: str | None = None
    payin: OfferingPayin | None = None
    payout: OfferingPayout | None = None
    required_claims: PresentationDefinition | None = None


class ResourceMetadata(WireModel):
    kind: str = "offering"
    from_: str = Field(alias="from")
    id: str
    created_at: str | None = None
    updated_at: str | None = None
    protocol: str | None = None


class Offering(WireModel):
    """A PFI's advertised tradable pair with its eligibility constraints."""

    metadata: ResourceMetadata
    data: OfferingData
    signature: str | None = None

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def pfi_did(self) -> str:
        return self.metadata.from_

    @property
    def constraint_fields(self) -> list[ConstraintField]:
        """Required claim fields of the first input descriptor, in order."""
        required_claims = self.data.required_claims
        if required_claims is None or not required_claims.input_descriptors:
            return []
        return required_claims.input_descriptors[0].constraints.fields
