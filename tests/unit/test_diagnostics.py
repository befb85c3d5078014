"""Tests for the diagnostics side channel."""

from __future__ import annotations

import io
import logging

import pytest

from tnvframe import AppendResult, FrameBuffer, FrameConfig, ValueType
from tnvframe.codec.types import TYPE_REGISTRY
from tnvframe.diagnostics import (
    DiagnosticsEmitter,
    LoggingSink,
    StreamSink,
    read_expression,
    tnv_decoder_text,
)


class TestTriggering:
    """Test which flags produce output at which calls."""

    def test_no_flags_no_output(self, lines: list[str]) -> None:
        frame = FrameBuffer(FrameConfig(), sink=lines.append)
        frame.append_uint16(1)
        frame.append_tnv(ValueType.VERSION, 0, 1)
        assert lines == []

    def test_added_bytes_only(self, lines: list[str]) -> None:
        frame = FrameBuffer(FrameConfig(emit_added_bytes=True), sink=lines.append)
        frame.append_uint16(0x1234)
        frame.append_int16(-250)

        assert lines == ["Added uint16: 4660", "Added int16: -250"]

    def test_decoder_text_only(self, lines: list[str]) -> None:
        frame = FrameBuffer(FrameConfig(emit_decoder_text=True), sink=lines.append)
        frame.append_uint8(1)
        frame.append_uint16(2)

        assert lines == [
            "val_uint8 = input.bytes[0];",
            "val_uint16 = input.bytes[1] | input.bytes[2] << 8;",
        ]

    def test_tnv_added_bytes(self, lines: list[str]) -> None:
        frame = FrameBuffer(FrameConfig(emit_added_bytes=True), sink=lines.append)
        frame.append_tnv(ValueType.VOLUMETRIC_WATER_CONTENT, 3, 500)

        assert lines == [
            "Added TNV: Type=0x03 (ValueType.VOLUMETRIC_WATER_CONTENT), Num=3, Len=2"
        ]

    def test_tnv_decoder_offsets(self, verbose_frame: FrameBuffer, lines: list[str]) -> None:
        verbose_frame.append_uint16(0x1234)
        lines.clear()
        verbose_frame.append_tnv(ValueType.VOLUMETRIC_WATER_CONTENT, 3, 500)

        snippet = lines[-1]
        assert "case 0x03:" in snippet
        assert "var num = input.bytes[3];" in snippet
        assert "var val = input.bytes[4] | input.bytes[5] << 8;" in snippet

    def test_rejected_append_emits_nothing(self, lines: list[str]) -> None:
        config = FrameConfig(capacity=1, emit_decoder_text=True, emit_added_bytes=True)
        frame = FrameBuffer(config, sink=lines.append)

        frame.append_uint16(1)
        frame.append_tnv(ValueType.VERSION, 0, 1)
        frame.append_tnv(0x7F, 0, 1)  # type: ignore[arg-type]

        assert lines == []

    def test_diagnostics_do_not_change_bytes(self, verbose_frame: FrameBuffer) -> None:
        quiet = FrameBuffer()
        for frame in (quiet, verbose_frame):
            frame.append_int32(-5)
            frame.append_tnv(ValueType.SOIL_TEMPERATURE, 2, -300)
            frame.append(b"\x01")

        assert quiet.raw() == verbose_frame.raw()


class TestDecoderText:
    """Test generated JavaScript expressions."""

    def test_unsigned(self) -> None:
        assert read_expression(0, 1, signed=False) == "input.bytes[0]"
        assert read_expression(2, 4, signed=False) == (
            "(input.bytes[2] | input.bytes[3] << 8 | input.bytes[4] << 16 "
            "| input.bytes[5] << 24) >>> 0"
        )

    def test_signed_sign_extension(self) -> None:
        assert read_expression(0, 1, signed=True) == "((input.bytes[0]) << 24) >> 24"
        assert read_expression(4, 2, signed=True) == (
            "((input.bytes[4] | input.bytes[5] << 8) << 16) >> 16"
        )
        assert read_expression(0, 4, signed=True).endswith(") | 0")

    def test_tnv_snippet_signed(self) -> None:
        info = TYPE_REGISTRY[ValueType.SOIL_TEMPERATURE]
        snippet = tnv_decoder_text(info, 10)

        assert "case 0x01:  // ValueType.SOIL_TEMPERATURE" in snippet
        assert "input.bytes[11]" in snippet
        assert "<< 16) >> 16" in snippet
        assert snippet.endswith("  break;")


class TestSinks:
    """Test provided sinks and sink failure handling."""

    def test_stream_sink(self) -> None:
        stream = io.StringIO()
        frame = FrameBuffer(FrameConfig(emit_added_bytes=True), sink=StreamSink(stream))
        frame.append_uint8(7)

        assert stream.getvalue() == "Added uint8: 7\n"

    def test_logging_sink(self, caplog: pytest.LogCaptureFixture) -> None:
        target = logging.getLogger("tnvframe.test.uplink")
        frame = FrameBuffer(
            FrameConfig(emit_added_bytes=True), sink=LoggingSink(target, logging.INFO)
        )

        with caplog.at_level(logging.INFO, logger="tnvframe.test.uplink"):
            frame.append_uint8(7)

        assert "Added uint8: 7" in caplog.text

    def test_closed_stream_does_not_break_encoding(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        stream = io.StringIO()
        stream.close()
        frame = FrameBuffer(FrameConfig(emit_added_bytes=True), sink=StreamSink(stream))

        with caplog.at_level(logging.WARNING, logger="tnvframe.diagnostics"):
            result = frame.append_uint16(0x1234)

        assert result
        assert frame.to_bytes() == b"\x34\x12"
        assert "Diagnostics sink write failed" in caplog.text

    def test_raising_sink_does_not_break_encoding(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test any sink exception is logged and the append still reports OK."""

        def broken_sink(text: str) -> None:
            raise RuntimeError("console gone")

        config = FrameConfig(emit_decoder_text=True, emit_added_bytes=True)
        frame = FrameBuffer(config, sink=broken_sink)

        with caplog.at_level(logging.WARNING, logger="tnvframe.diagnostics"):
            result = frame.append_tnv(ValueType.VERSION, 0, 1)

        assert result is AppendResult.OK
        assert frame.to_bytes() == b"\x00\x00\x01"
        assert "console gone" in caplog.text

    def test_default_sink_discards(self) -> None:
        emitter = DiagnosticsEmitter(emit_added_bytes=True)
        emitter.scalar_added(1, 1, False, 0)
        assert emitter.enabled
