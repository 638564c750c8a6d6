"""HTTP response sinks that a built envelope is written into."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseWriter(Protocol):
    """Minimal HTTP response writer consumed by ``ResponseBuilder.write``."""

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""

    def set_status(self, status_code: int) -> None:
        """Set the response status code."""

    def write(self, data: bytes) -> int:
        """Append *data* to the response body and return the bytes written."""


class BufferedResponseWriter:
    """In-memory :class:`ResponseWriter` that keeps everything it is given.

    Header names are matched case-insensitively, as in HTTP.
    """

    def __init__(self) -> None:
        self.status_code: int | None = None
        self._headers: dict[str, tuple[str, str]] = {}
        self._body = bytearray()

    def set_header(self, name: str, value: str) -> None:
        self._headers[name.lower()] = (name, value)

    def set_status(self, status_code: int) -> None:
        self.status_code = int(status_code)

    def write(self, data: bytes) -> int:
        self._body.extend(data)
        return len(data)

    @property
    def headers(self) -> dict[str, str]:
        """Headers as set, keyed by the name used in the last ``set_header``."""
        return dict(self._headers.values())

    def get_header(self, name: str) -> str | None:
        entry = self._headers.get(name.lower())
        return entry[1] if entry else None

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def text(self) -> str:
        return self._body.decode("utf-8")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self._body)

    @property
    def written(self) -> bool:
        """Whether any header, status or body write has happened."""
        return bool(self._headers) or self.status_code is not None or bool(self._body)
