"""Fluent builder for :class:`~httpstd.models.Response` envelopes.

A builder accumulates envelope fields and a status code across chained
calls. The terminal operations (:meth:`ResponseBuilder.build`,
:meth:`ResponseBuilder.send`, :meth:`ResponseBuilder.async_send` and
:meth:`ResponseBuilder.write`) snapshot that state and reset the builder so
the same instance can assemble the next response.

Builders keep mutable state without locking: use one per request.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Protocol, runtime_checkable

from .encoding import (
    JSON_CONTENT_TYPE,
    AsyncSendFunc,
    JSONEncoder,
    SendFunc,
    default_json_encoder,
    encode_json,
)
from .exceptions import ResponseEncodeError
from .models.response import Response, ResponseError, empty_response
from .writer import ResponseWriter

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = int(HTTPStatus.OK)


@runtime_checkable
class ResponseBuilder(Protocol):
    """Chainable operations for assembling and emitting a :class:`Response`."""

    @property
    def status_code(self) -> int: ...

    @property
    def default_status_code(self) -> int: ...

    def append_error(self, code: int, reason: str) -> ResponseBuilder: ...

    def append_errors(self, *errors: ResponseError) -> ResponseBuilder: ...

    def set_data(self, data: Any) -> ResponseBuilder: ...

    def set_errors(self, *errors: ResponseError) -> ResponseBuilder: ...

    def set_json_encoder(self, encoder: JSONEncoder | None) -> ResponseBuilder: ...

    def set_message(self, message: str) -> ResponseBuilder: ...

    def set_status_code(self, status_code: int) -> ResponseBuilder: ...

    def clean(self, status_code: int | None = None) -> ResponseBuilder: ...

    def build(self) -> Response: ...

    def send(self, callback: SendFunc) -> Any: ...

    async def async_send(self, callback: AsyncSendFunc) -> Any: ...

    def write(self, writer: ResponseWriter) -> int: ...


class JSONResponseBuilder:
    """Assembles a :class:`Response` and the status code it is sent with.

    The constructor accepts plain values; nothing is read from the environment.
    """

    def __init__(
        self,
        status_code: int = DEFAULT_STATUS_CODE,
        *,
        json_encoder: JSONEncoder | None = None,
    ) -> None:
        self._default_status_code = int(status_code)
        self._status_code = self._default_status_code
        self._encode_json: JSONEncoder = json_encoder or default_json_encoder
        self._response = empty_response()

    @property
    def status_code(self) -> int:
        """Status code the next terminal operation will use."""
        return self._status_code

    @property
    def default_status_code(self) -> int:
        """Status code restored by :meth:`clean` and every terminal operation."""
        return self._default_status_code

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def append_error(self, code: int, reason: str) -> ResponseBuilder:
        """Add a single :class:`ResponseError` built from *code* and *reason*."""
        return self.append_errors(ResponseError(code=code, reason=reason))

    def append_errors(self, *errors: ResponseError) -> ResponseBuilder:
        """Add *errors* after any already set, keeping their order."""
        if self._response.errors is None:
            return self.set_errors(*errors)
        return self.set_errors(*self._response.errors, *errors)

    def set_data(self, data: Any) -> ResponseBuilder:
        self._response.data = data
        return self

    def set_errors(self, *errors: ResponseError) -> ResponseBuilder:
        """Replace the errors.

        A non-empty set marks the response unsuccessful. An empty call clears
        the errors but leaves ``success`` as it was.
        """
        if errors:
            self._response.success = False
            self._response.errors = list(errors)
        else:
            self._response.errors = None
        return self

    def set_json_encoder(self, encoder: JSONEncoder | None) -> ResponseBuilder:
        """Replace the encoder used by :meth:`write`. ``None`` keeps the current one."""
        if encoder is not None:
            self._encode_json = encoder
        return self

    def set_message(self, message: str) -> ResponseBuilder:
        self._response.message = message
        return self

    def set_status_code(self, status_code: int) -> ResponseBuilder:
        """Set the status code for this response only; the default is unchanged."""
        self._status_code = int(status_code)
        return self

    def clean(self, status_code: int | None = None) -> ResponseBuilder:
        """Discard the envelope in progress.

        The status code goes back to *status_code* when given, otherwise to
        the builder's default.
        """
        if status_code is None:
            status_code = self._default_status_code
        self._status_code = int(status_code)
        self._response = empty_response()
        return self

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def _finalize(self) -> tuple[int, Response]:
        status_code = self._status_code
        return status_code, self.build()

    def build(self) -> Response:
        """Return the finished envelope and reset the builder."""
        response = self._response.model_copy()
        self.clean()
        return response

    def send(self, callback: SendFunc) -> Any:
        """Build the envelope and hand it to *callback* as ``(status_code, response)``.

        Whatever the callback returns is returned; its exceptions propagate.
        """
        status_code, response = self._finalize()
        logger.debug("Sending response with status %s", status_code)
        return callback(status_code, response)

    async def async_send(self, callback: AsyncSendFunc) -> Any:
        """Coroutine variant of :meth:`send` for async dispatchers."""
        status_code, response = self._finalize()
        logger.debug("Sending response with status %s", status_code)
        return await callback(status_code, response)

    def write(self, writer: ResponseWriter) -> int:
        """Build the envelope, encode it as JSON and write it to *writer*.

        Returns the byte count reported by the writer. If encoding fails a
        :class:`ResponseEncodeError` is raised before the writer is touched.
        """
        status_code, response = self._finalize()
        try:
            body = encode_json(self._encode_json, response)
        except Exception as exc:
            logger.error("Failed to encode response: %s", exc)
            raise ResponseEncodeError(f"Failed to encode response: {exc}") from exc

        writer.set_header("Content-Type", JSON_CONTENT_TYPE)
        writer.set_status(status_code)
        written = writer.write(body)
        logger.debug("Wrote %s byte response with status %s", written, status_code)
        return written


def new_response(
    status_code: int = DEFAULT_STATUS_CODE,
    *,
    json_encoder: JSONEncoder | None = None,
) -> ResponseBuilder:
    """Create a :class:`JSONResponseBuilder` whose default status is *status_code*."""
    return JSONResponseBuilder(status_code, json_encoder=json_encoder)
