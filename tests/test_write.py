"""Tests for writing envelopes to a response writer."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from httpstd import (
    BufferedResponseWriter,
    ResponseBuilder,
    ResponseEncodeError,
    ResponseWriter,
    new_response,
)


class TestWrite:
    def test_error_response(self, writer: BufferedResponseWriter) -> None:
        count = new_response().append_error(404, "not found").write(writer)

        assert writer.status_code == 200
        assert writer.get_header("Content-Type") == "application/json"
        payload = writer.json()
        assert payload["success"] is False
        assert payload["errors"] == [{"code": 404, "reason": "not found"}]
        assert "timestamp" in payload
        assert "message" not in payload
        assert "data" not in payload
        assert count == len(writer.body)

    def test_status_code(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        builder.set_status_code(201).set_data({"id": 3}).write(writer)
        assert writer.status_code == 201
        assert writer.json()["data"] == {"id": 3}

    def test_status_after_clean(self, writer: BufferedResponseWriter) -> None:
        new_response(201).set_status_code(500).clean().write(writer)
        assert writer.status_code == 201
        assert writer.json()["success"] is True

    def test_resets_builder(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        builder.set_status_code(503).set_message("down").write(writer)
        assert builder.status_code == 200
        assert builder.build().message == ""

    def test_compact_body(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        builder.set_message("ok").write(writer)
        assert b" " not in writer.body.replace(b'"ok"', b"")


class TestWriteFailures:
    def test_failing_encoder(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        def fail(value: Any) -> bytes:
            raise ValueError("cannot encode")

        with pytest.raises(ResponseEncodeError) as excinfo:
            builder.set_json_encoder(fail).set_message("m").write(writer)

        assert isinstance(excinfo.value.__cause__, ValueError)
        assert writer.written is False
        assert builder.build().message == ""

    def test_encoder_returning_non_bytes(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        with pytest.raises(ResponseEncodeError) as excinfo:
            builder.set_json_encoder(lambda value: 5).write(writer)

        assert isinstance(excinfo.value.__cause__, TypeError)
        assert "int" in str(excinfo.value)
        assert writer.written is False

    def test_bytearray_encoder_accepted(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        assert builder.set_json_encoder(lambda value: bytearray(b"{}")).write(writer) == 2
        assert writer.body == b"{}"

    def test_unencodable_data(
        self, builder: ResponseBuilder, writer: BufferedResponseWriter
    ) -> None:
        with pytest.raises(ResponseEncodeError):
            builder.set_data(object()).write(writer)
        assert writer.written is False

    def test_writer_error_propagates(self, builder: ResponseBuilder) -> None:
        class BrokenWriter(BufferedResponseWriter):
            def write(self, data: bytes) -> int:
                raise OSError("connection reset")

        broken = BrokenWriter()
        with pytest.raises(OSError, match="connection reset"):
            builder.write(broken)

        assert broken.status_code == 200
        assert broken.get_header("content-type") == "application/json"

    def test_writer_without_count(
        self, builder: ResponseBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        class SilentWriter(BufferedResponseWriter):
            def write(self, data: bytes) -> int:
                super().write(data)
                return None  # type: ignore[return-value]

        sink = SilentWriter()
        with caplog.at_level(logging.DEBUG, logger="httpstd.builder"):
            assert builder.write(sink) is None

        assert sink.json()["success"] is True
        assert "Wrote None byte response" in caplog.text

    def test_partial_write_count(self, builder: ResponseBuilder) -> None:
        class ShortWriter(BufferedResponseWriter):
            def write(self, data: bytes) -> int:
                return super().write(data[:5])

        assert builder.write(ShortWriter()) == 5


class TestBufferedResponseWriter:
    def test_is_response_writer(self, writer: BufferedResponseWriter) -> None:
        assert isinstance(writer, ResponseWriter)

    def test_headers_case_insensitive(self, writer: BufferedResponseWriter) -> None:
        writer.set_header("content-type", "text/plain")
        writer.set_header("Content-Type", "application/json")
        assert writer.headers == {"Content-Type": "application/json"}
        assert writer.get_header("CONTENT-TYPE") == "application/json"
        assert writer.get_header("X-Missing") is None

    def test_body_accumulates(self, writer: BufferedResponseWriter) -> None:
        assert writer.write(b"ab") == 2
        assert writer.write(b"cd") == 2
        assert writer.body == b"abcd"
        assert writer.text == "abcd"

    def test_written_flag(self, writer: BufferedResponseWriter) -> None:
        assert writer.written is False
        writer.set_status(204)
        assert writer.written is True
