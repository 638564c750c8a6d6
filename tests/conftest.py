"""Shared fixtures for httpstd tests."""

from __future__ import annotations

import pytest

from httpstd import BufferedResponseWriter, ResponseBuilder, new_response


@pytest.fixture
def builder() -> ResponseBuilder:
    """Return a builder with the default 200 status."""
    return new_response()


@pytest.fixture
def writer() -> BufferedResponseWriter:
    """Return an empty in-memory response writer."""
    return BufferedResponseWriter()
