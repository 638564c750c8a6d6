"""Exception hierarchy for httpstd."""


class HTTPStdError(Exception):
    """Base exception for all httpstd errors."""


class ResponseEncodeError(HTTPStdError):
    """The JSON encoder could not serialize a response envelope."""
