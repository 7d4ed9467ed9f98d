"""Helpers where an httpx caller hands payloads to and from the codec."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from provider_schemas.codec import decode, encode
from provider_schemas.errors import ProviderError
from provider_schemas.tolerance import decode_tolerant

_JSON_CONTENT_TYPE = "application/json"

_logger = logging.getLogger(__name__)


def build_request(
    method: str,
    url: str,
    entity: Any,
    body: Any,
    *,
    headers: Mapping[str, str] | None = None,
) -> httpx.Request:
    """Build an ``httpx.Request`` whose content is ``body`` encoded as ``entity``."""
    merged = {"Content-Type": _JSON_CONTENT_TYPE}
    merged.update(headers or {})
    return httpx.Request(method, url, headers=merged, content=encode(entity, body))


def decode_response(
    entity: Any,
    response: httpx.Response,
    *,
    provider: str,
    stripped_fields: Iterable[str] = (),
) -> Any:
    """Decode a complete response body, raising ``ProviderError`` for HTTP errors."""
    if response.status_code >= 400:
        raise ProviderError(
            provider,
            response.text or response.reason_phrase,
            status_code=response.status_code,
        )

    fields = tuple(stripped_fields)
    _logger.debug("Decoding %s response (%d bytes)", provider, len(response.content))
    if fields:
        return decode_tolerant(entity, fields, response.content)
    return decode(entity, response.content)
