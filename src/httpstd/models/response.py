"""Response envelope models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ResponseError(BaseModel):
    """An error entry carried in the ``errors`` list of a :class:`Response`."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(strict=True, ge=_INT64_MIN, le=_INT64_MAX)
    reason: str


class Response(BaseModel):
    """Standard API response envelope.

    ``message``, ``errors`` and ``data`` are left out of the serialized form
    while they hold their empty value; ``success`` and ``timestamp`` are
    always present.
    """

    success: bool = True
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    message: str = ""
    errors: list[ResponseError] | None = None
    data: Any = None

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        if not self.message:
            payload.pop("message", None)
        if not self.errors:
            payload.pop("errors", None)
        if self.data is None:
            payload.pop("data", None)
        return payload

    def get_message(self) -> tuple[str, bool]:
        """Return the message and whether it is non-empty."""
        return self.message, len(self.message) > 0

    def get_errors(self) -> tuple[list[ResponseError] | None, bool]:
        """Return the errors and whether there is at least one."""
        return self.errors, self.errors is not None and len(self.errors) > 0

    def get_data(self) -> tuple[Any, bool]:
        """Return the payload and whether one is set.

        Falsy payloads such as ``0`` or ``{}`` count as set; only ``None`` is absent.
        """
        return self.data, self.data is not None


def empty_response() -> Response:
    """Create a new successful envelope stamped with the current time."""
    return Response(success=True, message="", errors=None, data=None)
