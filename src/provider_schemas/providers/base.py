"""Provider-agnostic base model for wire schemas."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError
from typing_extensions import Self

from provider_schemas.codec import decode, encode
from provider_schemas.tolerance import decode_tolerant
from provider_schemas.types import JsonData

_ALLOWED_CONTROL_CHARACTERS = frozenset("\t\n\r")


class WireModel(BaseModel):
    """Immutable schema mapped onto a provider's wire JSON.

    Validation is strict: a present field whose JSON type disagrees with its
    annotation is an error, never coerced.

    Subclasses list field names the provider is known to fill with undecodable
    values in ``tolerated_fields``. Those fields are documented as strings; the
    tolerant path strips them before decoding so they never appear on the model,
    and the plain path rejects values that are not clean strings.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    tolerated_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _check_tolerated_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name in cls.tolerated_fields:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise PydanticCustomError(
                    "string_type",
                    "Field '{tolerated_field}' should be a string",
                    {"tolerated_field": name},
                )
            if any(ord(char) < 32 and char not in _ALLOWED_CONTROL_CHARACTERS for char in value):
                raise PydanticCustomError(
                    "string_control_character",
                    "Field '{tolerated_field}' contains control characters",
                    {"tolerated_field": name},
                )
        return data

    @classmethod
    def deserialize(cls, data: JsonData) -> Self:
        """Decode a provider payload into this schema."""
        if cls.tolerated_fields:
            return decode_tolerant(cls, cls.tolerated_fields, data)
        return decode(cls, data)

    def serialize(self) -> bytes:
        """Encode this value into the provider's wire JSON."""
        return encode(type(self), self)
