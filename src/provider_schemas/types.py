"""Shared annotated types used by the provider schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

JsonData = Union[bytes, bytearray, str]


def _parse_iso8601(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("datetime_type", "Input should be an ISO-8601 string")
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise PydanticCustomError(
            "datetime_parsing",
            "Input should be an ISO-8601 string, got '{value}'",
            {"value": value},
        ) from exc


# Unlike pydantic's lax datetime, unix timestamps are rejected.
IsoDatetime = Annotated[datetime, BeforeValidator(_parse_iso8601)]
