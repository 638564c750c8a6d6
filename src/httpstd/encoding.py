"""JSON encoding and dispatch callback types."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import pydantic_core

JSON_CONTENT_TYPE = "application/json"

JSONEncoder = Callable[[Any], bytes | str]
SendFunc = Callable[[int, Any], Any]
AsyncSendFunc = Callable[[int, Any], Awaitable[Any]]


def default_json_encoder(value: Any) -> bytes:
    """Serialize *value* to compact JSON bytes.

    Pydantic models are emitted through their own serializers, so a
    :class:`~httpstd.models.Response` comes out in its wire shape.
    """
    return pydantic_core.to_json(value)


def encode_json(encoder: JSONEncoder, value: Any) -> bytes:
    """Run *encoder* over *value*, UTF-8 encoding a ``str`` result."""
    encoded = encoder(value)
    if isinstance(encoded, str):
        return encoded.encode("utf-8")
    if not isinstance(encoded, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"JSON encoder returned {type(encoded).__name__}, expected bytes or str"
        )
    return bytes(encoded)
