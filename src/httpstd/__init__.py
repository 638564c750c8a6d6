"""httpstd — uniform JSON response envelopes and a fluent builder to emit them."""

from ._version import __version__
from .builder import (
    DEFAULT_STATUS_CODE,
    JSONResponseBuilder,
    ResponseBuilder,
    new_response,
)
from .encoding import (
    JSON_CONTENT_TYPE,
    AsyncSendFunc,
    JSONEncoder,
    SendFunc,
    default_json_encoder,
)
from .exceptions import HTTPStdError, ResponseEncodeError
from .models import Response, ResponseError, empty_response
from .writer import BufferedResponseWriter, ResponseWriter

__all__ = [
    "DEFAULT_STATUS_CODE",
    "JSON_CONTENT_TYPE",
    "AsyncSendFunc",
    "BufferedResponseWriter",
    "HTTPStdError",
    "JSONEncoder",
    "JSONResponseBuilder",
    "Response",
    "ResponseBuilder",
    "ResponseEncodeError",
    "ResponseError",
    "ResponseWriter",
    "SendFunc",
    "__version__",
    "default_json_encoder",
    "empty_response",
    "new_response",
]
