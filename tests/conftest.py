"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tnvframe import FrameBuffer, FrameConfig


@pytest.fixture
def frame() -> FrameBuffer:
    """Empty buffer with the default 255-byte capacity."""
    return FrameBuffer()


@pytest.fixture
def lines() -> list[str]:
    """List collecting diagnostics text; pass ``lines.append`` as the sink."""
    return []


@pytest.fixture
def verbose_frame(lines: list[str]) -> FrameBuffer:
    """Buffer with both diagnostics flags on, writing into ``lines``."""
    config = FrameConfig(emit_decoder_text=True, emit_added_bytes=True)
    return FrameBuffer(config, sink=lines.append)
