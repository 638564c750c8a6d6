"""Pydantic models for httpstd."""

from .response import Response, ResponseError, empty_response

__all__ = [
    "Response",
    "ResponseError",
    "empty_response",
]
