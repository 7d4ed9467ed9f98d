"""Schema/variant codec between typed values and provider wire JSON."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticSerializationError

from provider_schemas.errors import (
    DecodeError,
    DuplicateVariantTag,
    EncodeError,
    MalformedPayload,
    MissingRequiredField,
    TypeMismatch,
    UnknownVariant,
)
from provider_schemas.types import JsonData

_logger = logging.getLogger(__name__)

_EXPECTED_KINDS = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "datetime_type": "ISO-8601 datetime",
    "datetime_parsing": "ISO-8601 datetime",
    "url_type": "URL",
    "url_parsing": "URL",
    "url_scheme": "URL",
    "literal_error": "literal",
    "string_control_character": "string without control characters",
}


def decode(entity: Any, data: JsonData) -> Any:
    """Decode a JSON payload into a typed value of ``entity``.

    ``entity`` may be a model class, a variant union or a ``list`` of either.
    Pydantic validation errors are translated into the ``DecodeError`` family;
    the first reported error decides which exception is raised.
    """
    adapter = TypeAdapter(entity)
    try:
        return adapter.validate_json(data)
    except ValidationError as exc:
        raise _translate(entity, exc) from exc


def encode(entity: Any, value: Any) -> bytes:
    """Serialize ``value`` as ``entity`` using wire names.

    Optional fields holding ``None`` are omitted from the output. Fields are
    emitted in declaration order.
    """
    adapter = TypeAdapter(entity)
    try:
        return adapter.dump_json(value, by_alias=True, exclude_none=True, warnings="error")
    except PydanticSerializationError as exc:
        raise EncodeError(f"Cannot encode value as {_entity_name(entity)}: {exc}") from exc


def variant_tags(schema: Any) -> dict[str, type]:
    """Return the discriminator value to alternative mapping of a variant union.

    The mapping preserves declaration order. Two alternatives declaring the same
    discriminator value raise ``DuplicateVariantTag``.
    """
    discriminator, alternatives = _split_variant(schema)
    tags: dict[str, type] = {}
    for alternative in alternatives:
        field = alternative.model_fields[discriminator]
        for tag in get_args(field.annotation):
            if tag in tags:
                raise DuplicateVariantTag(tag)
            tags[tag] = alternative
    return tags


def decode_variant(schema: Any, raw: Mapping[str, Any]) -> Any:
    """Decode an already parsed JSON object against a variant union."""
    discriminator, _ = _split_variant(schema)
    if not isinstance(raw, Mapping):
        raise TypeMismatch("", "object")
    if discriminator not in raw:
        raise MissingRequiredField(discriminator)

    tag = raw[discriminator]
    for value, alternative in variant_tags(schema).items():
        if value == tag:
            try:
                return TypeAdapter(alternative).validate_python(dict(raw))
            except ValidationError as exc:
                raise _translate(alternative, exc) from exc
    raise UnknownVariant(str(tag), discriminator)


def _split_variant(schema: Any) -> tuple[str, tuple[type, ...]]:
    if get_origin(schema) is not Annotated:
        raise TypeError(f"{schema!r} is not an annotated variant union")
    union, *metadata = get_args(schema)
    discriminator = next(
        (m.discriminator for m in metadata if isinstance(m, FieldInfo) and m.discriminator),
        None,
    )
    if not isinstance(discriminator, str) or get_origin(union) not in (Union, UnionType):
        raise TypeError(f"{schema!r} does not declare a string discriminator")
    return discriminator, get_args(union)


def _translate(entity: Any, exc: ValidationError) -> DecodeError:
    error = exc.errors(include_url=False)[0]
    kind = error["type"]
    path = _wire_path(entity, error["loc"])
    ctx = error.get("ctx") or {}
    if "tolerated_field" in ctx:
        path = f"{path}.{ctx['tolerated_field']}" if path else ctx["tolerated_field"]
    _logger.debug("Failed to decode %s at '%s': %s", _entity_name(entity), path, kind)

    if kind in ("json_invalid", "json_type"):
        return MalformedPayload(ctx.get("error", error["msg"]))
    if kind == "missing":
        return MissingRequiredField(path)
    if kind == "union_tag_not_found":
        field = str(ctx.get("discriminator", "")).strip("'")
        return MissingRequiredField(f"{path}.{field}" if path else field)
    if kind == "union_tag_invalid":
        return UnknownVariant(str(ctx.get("tag")), path)
    if kind == "enum":
        return TypeMismatch(path, f"one of {ctx.get('expected')}")
    return TypeMismatch(path, _EXPECTED_KINDS.get(kind, error["msg"]))


def _entity_name(entity: Any) -> str:
    return getattr(entity, "__name__", repr(entity))



def _wire_path(entity: Any, loc: tuple[int | str, ...]) -> str:
    # Pydantic inserts the discriminator value after a tagged union's position;
    # walk the declared types so those entries are dropped from the wire path.
    parts: list[str] = []
    current = entity
    for part in loc:
        current = _unwrap_optional(current)
        if isinstance(part, str) and _is_variant(current):
            alternative = variant_tags(current).get(part)
            if alternative is not None:
                current = alternative
                continue
        parts.append(str(part))
        current = _child_type(current, part)
    return ".".join(parts)


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _is_variant(tp: Any) -> bool:
    try:
        _split_variant(tp)
    except TypeError:
        return False
    return True


def _child_type(tp: Any, part: int | str) -> Any:
    if isinstance(part, int) and get_origin(tp) is list:
        return get_args(tp)[0]
    if isinstance(part, str) and isinstance(tp, type) and issubclass(tp, BaseModel):
        for name, field in tp.model_fields.items():
            if part in (name, field.alias):
                return field.annotation
    return None
