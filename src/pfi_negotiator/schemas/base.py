"""Shared pydantic configuration for tbdex wire-format models.

tbdex resources use camelCase keys on the wire. Models here use snake_case
attributes with camelCase aliases and accept either form on input. Unknown
keys are kept so newer protocol fields survive a round trip.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models parsed from PFI and issuer payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
