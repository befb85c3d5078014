"""Configuration for a frame encoding session."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigError

#: LoRaWAN application payloads never exceed this many bytes.
MAX_CAPACITY = 255


@dataclass(frozen=True)
class FrameConfig:
    """Configuration for a FrameBuffer.

    Attributes:
        capacity: Maximum payload size in bytes (default 255, range 1-255).
            Typical LoRaWAN limits by data rate (EU868):
            - DR0-DR2: 51 bytes
            - DR3: 115 bytes
            - DR4-DR7: 222 bytes

        emit_decoder_text: Write receiver-side JavaScript snippets to the
            diagnostics sink after each successful append (default False).

        emit_added_bytes: Write a log line naming each appended value to the
            diagnostics sink (default False).

        strict: Raise CapacityExceededError / UnknownTypeError instead of
            returning a rejection result (default False). The buffer is left
            unchanged either way.

    Examples:
        ```python
        import sys

        from tnvframe import FrameBuffer, FrameConfig, StreamSink

        # DR0 uplink with decoder snippets printed to stdout
        config = FrameConfig(capacity=51, emit_decoder_text=True)
        frame = FrameBuffer(config, sink=StreamSink(sys.stdout))
        ```
    """

    capacity: int = MAX_CAPACITY
    emit_decoder_text: bool = False
    emit_added_bytes: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise ConfigError(f"capacity must be an int, got {type(self.capacity).__name__}")

        if not 1 <= self.capacity <= MAX_CAPACITY:
            raise ConfigError(f"capacity must be 1-{MAX_CAPACITY}, got {self.capacity}")

        for name in ("emit_decoder_text", "emit_added_bytes", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")
