"""Field stripping for providers that emit values their schema cannot hold."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from provider_schemas.codec import decode
from provider_schemas.errors import MalformedPayload
from provider_schemas.types import JsonData

_logger = logging.getLogger(__name__)


def strip_fields(field_names: Iterable[str], data: JsonData) -> bytes:
    """Remove top-level fields from a JSON object, or from each object of an array.

    The payload is parsed in non-strict mode so raw control characters inside
    strings do not prevent stripping. Names that are not present are ignored.
    """
    names = frozenset(field_names)
    try:
        tree = json.loads(data, strict=False)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayload(str(exc)) from exc

    if isinstance(tree, list):
        tree = [_without(item, names) for item in tree]
    else:
        tree = _without(tree, names)
    return json.dumps(tree).encode()


def decode_tolerant(entity: Any, stripped_fields: Iterable[str], data: JsonData) -> Any:
    """Strip ``stripped_fields`` from the payload, then decode it as ``entity``."""
    return decode(entity, strip_fields(stripped_fields, data))


def _without(node: Any, names: frozenset[str]) -> Any:
    if not isinstance(node, dict):
        return node
    dropped = sorted(names.intersection(node))
    if dropped:
        _logger.debug("Stripping fields %s before decoding", ", ".join(dropped))
    return {key: value for key, value in node.items() if key not in names}
