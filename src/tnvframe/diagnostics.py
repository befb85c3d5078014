"""Diagnostics side channel for frame encoding.

After each successful append a FrameBuffer hands the appended value to a
DiagnosticsEmitter, which may write two kinds of text to an injected sink:

- an added-bytes log line (``Added uint16: 4660``)
- a receiver-side decoder snippet in TTN payload-formatter JavaScript,
  reading the value back from ``input.bytes`` at the offsets it was written to

Nothing here influences the buffer. A sink that fails to write (closed
stream, disconnected console, or any other exception raised by the sink) is
reported through this module's logger and otherwise ignored.

Sinks are plain callables taking one line of text:

```python
frame = FrameBuffer(FrameConfig(emit_decoder_text=True), sink=print)
frame = FrameBuffer(config, sink=StreamSink(sys.stderr))
frame = FrameBuffer(config, sink=LoggingSink(logging.getLogger("uplink")))
```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TextIO

if TYPE_CHECKING:
    from .codec.types import TypeInfo

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def null_sink(text: str) -> None:
    """Discard diagnostics text."""


class StreamSink:
    """Write diagnostics lines to a text stream such as sys.stdout."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def __call__(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class LoggingSink:
    """Forward diagnostics lines to a logger."""

    def __init__(self, target: logging.Logger, level: int = logging.DEBUG) -> None:
        self.target = target
        self.level = level

    def __call__(self, text: str) -> None:
        self.target.log(self.level, text)


class DiagnosticsEmitter:
    """Turns successful appends into diagnostics text.

    Args:
        sink: Callable receiving one line (or snippet) of text per call
        emit_decoder_text: Emit TTN JavaScript decoder snippets
        emit_added_bytes: Emit added-value log lines
    """

    def __init__(
        self,
        sink: Sink | None = None,
        emit_decoder_text: bool = False,
        emit_added_bytes: bool = False,
    ) -> None:
        self._sink: Sink = sink if sink is not None else null_sink
        self._emit_decoder_text = emit_decoder_text
        self._emit_added_bytes = emit_added_bytes

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def emit_decoder_text(self) -> bool:
        return self._emit_decoder_text

    @property
    def emit_added_bytes(self) -> bool:
        return self._emit_added_bytes

    @property
    def enabled(self) -> bool:
        return self._emit_decoder_text or self._emit_added_bytes

    def scalar_added(self, value: int, width: int, signed: bool, offset: int) -> None:
        """Report a scalar written at ``offset``."""
        kind = f"{'int' if signed else 'uint'}{width * 8}"
        if self.emit_decoder_text:
            self._write(scalar_decoder_text(width, signed, offset))
        if self.emit_added_bytes:
            self._write(f"Added {kind}: {value}")

    def raw_added(self, data: bytes, offset: int) -> None:
        """Report raw bytes written at ``offset``."""
        if self.emit_decoder_text:
            for i in range(len(data)):
                self._write(f"val_byte{i} = input.bytes[{offset + i}];")
        if self.emit_added_bytes:
            self._write(f"Added {len(data)} bytes: {' '.join(f'0x{b:02X}' for b in data)}")

    def tnv_added(self, info: TypeInfo, number: int, offset: int) -> None:
        """Report a TNV record whose header starts at ``offset``."""
        if self.emit_added_bytes:
            self._write(
                f"Added TNV: Type=0x{info.wire_code:02X} ({info.display_name}), "
                f"Num={number}, Len={info.width}"
            )
        if self.emit_decoder_text:
            self._write(tnv_decoder_text(info, offset))

    def _write(self, text: str) -> None:
        try:
            self._sink(text)
        except Exception as err:
            # Sink failures never change the outcome of an append
            logger.warning("Diagnostics sink write failed: %s", err, exc_info=True)


def read_expression(offset: int, width: int, signed: bool) -> str:
    """Build a JavaScript expression reading an integer from ``input.bytes``.

    JavaScript bitwise operators work on signed 32-bit integers, so narrower
    signed values are sign-extended by shifting the top bit into bit 31 and
    arithmetic-shifting back.

    Example:
        >>> read_expression(4, 2, signed=True)
        '((input.bytes[4] | input.bytes[5] << 8) << 16) >> 16'
    """
    parts = []
    for i in range(width):
        part = f"input.bytes[{offset + i}]"
        if i:
            part += f" << {8 * i}"
        parts.append(part)
    expr = " | ".join(parts)

    if not signed:
        if width == 4:
            # Unsigned shift keeps uint32 values positive
            return f"({expr}) >>> 0"
        return expr
    if width == 4:
        return f"({expr}) | 0"
    shift = 32 - 8 * width
    return f"(({expr}) << {shift}) >> {shift}"


def scalar_decoder_text(width: int, signed: bool, offset: int) -> str:
    kind = f"{'int' if signed else 'uint'}{width * 8}"
    return f"val_{kind} = {read_expression(offset, width, signed)};"


def tnv_decoder_text(info: TypeInfo, offset: int) -> str:
    """Build a ``case`` block for a TTN decoder switch on the type byte."""
    name = info.display_name.rsplit(".", 1)[-1]
    value_offset = offset + 2
    lines = [
        f"// TNV decoder snippet for {info.display_name} (integrate in TTN switch):",
        f"case 0x{info.wire_code:02X}:  // {info.display_name}",
        f"  var num = input.bytes[{offset + 1}];",
        f"  var val = {read_expression(value_offset, info.width, info.signed)};",
        f'  decoded["{name}_" + num] = val;  // Adjust key/name as needed',
        "  break;",
    ]
    return "\n".join(lines)
