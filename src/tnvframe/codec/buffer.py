"""Bounded append buffer for uplink payloads.

FrameBuffer is a fixed-capacity byte buffer with a write cursor. Every append
is all-or-nothing: either every byte fits and the cursor advances by exactly
the number of bytes written, or nothing is written and the cursor stays put.
Over-capacity writes are never truncated and never wrap around.

FrameBuffer is not thread-safe. Use one buffer per encoding session, or guard
it with a lock if several producers share it.
"""

from __future__ import annotations

import enum
from typing import Iterable

from ..config import FrameConfig
from ..diagnostics import DiagnosticsEmitter, Sink
from ..exceptions import CapacityExceededError, EncodeError, UnknownTypeError
from ..utils.hexfmt import format_hex, to_hex
from .scalar import pack
from .tnv import TnvRecord, build_record
from .types import ValueType, type_info


class AppendResult(enum.Enum):
    """Outcome of an append.

    Only OK is truthy, so ``if frame.append_uint8(v):`` reads naturally.
    """

    OK = "ok"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    UNKNOWN_TYPE = "unknown_type"

    def __bool__(self) -> bool:
        return self is AppendResult.OK


class FrameBuffer:
    """Fixed-capacity little-endian payload buffer.

    Examples:
        ```python
        from tnvframe import FrameBuffer, ValueType

        frame = FrameBuffer()
        frame.append_uint16(0x1234)
        frame.append_tnv(ValueType.VOLUMETRIC_WATER_CONTENT, 3, 500)

        frame.hex()   # '34120303F401'
        frame.size()  # 6
        ```
    """

    def __init__(self, config: FrameConfig | None = None, sink: Sink | None = None) -> None:
        """Create an empty buffer.

        Args:
            config: Session configuration. If None, uses default config.
            sink: Diagnostics sink. If None, diagnostics text is discarded.
        """
        self._config = config if config is not None else FrameConfig()
        self._diagnostics = DiagnosticsEmitter(
            sink,
            emit_decoder_text=self._config.emit_decoder_text,
            emit_added_bytes=self._config.emit_added_bytes,
        )
        self._data = bytearray(self._config.capacity)
        self._cursor = 0

    def __len__(self) -> int:
        return self._cursor

    def __repr__(self) -> str:
        return f"FrameBuffer(size={self._cursor}, capacity={self.capacity}, data={self.hex()!r})"

    @property
    def config(self) -> FrameConfig:
        """Session configuration (capacity, diagnostics flags, strict mode)."""
        return self._config

    @property
    def diagnostics(self) -> DiagnosticsEmitter:
        """Emitter receiving every successful append."""
        return self._diagnostics

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Number of bytes still free."""
        return len(self._data) - self._cursor

    def size(self) -> int:
        """Return the number of valid bytes written so far."""
        return self._cursor

    def clear(self) -> None:
        """Empty the buffer and zero every byte of its capacity."""
        self._data[:] = bytes(len(self._data))
        self._cursor = 0

    def to_bytes(self) -> bytes:
        """Return the valid bytes, ready to transmit."""
        return bytes(self._data[: self._cursor])

    def raw(self) -> bytes:
        """Return a copy of the whole capacity, including unused bytes."""
        return bytes(self._data)

    def hex(self) -> str:
        """Return the valid bytes as uppercase hex, e.g. ``'34120303F401'``."""
        return to_hex(self.to_bytes())

    def format_hex(self) -> str:
        """Return the valid bytes as a spaced listing, e.g. ``'0x34 0x12'``."""
        return format_hex(self.to_bytes())

    def fits(self, num_bytes: int) -> bool:
        return self._cursor + num_bytes <= len(self._data)

    def append(self, data: bytes | bytearray | memoryview) -> AppendResult:
        """Append raw bytes in the order given.

        Args:
            data: Non-empty bytes to write; the caller lays out multi-byte values

        Returns:
            AppendResult.OK, or CAPACITY_EXCEEDED with the buffer unchanged

        Raises:
            EncodeError: If data is not bytes-like or is empty
            CapacityExceededError: In strict mode, instead of returning
                CAPACITY_EXCEEDED
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise EncodeError(f"Expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if not data:
            raise EncodeError("Cannot append empty data")
        offset = self._cursor
        result = self._write(data)
        if result is AppendResult.OK and self._diagnostics.enabled:
            self._diagnostics.raw_added(data, offset)
        return result

    def append_uint8(self, value: int) -> AppendResult:
        return self._append_scalar(value, 1, signed=False)

    def append_uint16(self, value: int) -> AppendResult:
        return self._append_scalar(value, 2, signed=False)

    def append_uint32(self, value: int) -> AppendResult:
        return self._append_scalar(value, 4, signed=False)

    def append_int8(self, value: int) -> AppendResult:
        return self._append_scalar(value, 1, signed=True)

    def append_int16(self, value: int) -> AppendResult:
        return self._append_scalar(value, 2, signed=True)

    def append_int32(self, value: int) -> AppendResult:
        return self._append_scalar(value, 4, signed=True)

    def append_tnv(self, tag: ValueType, number: int, value: int | bytes) -> AppendResult:
        """Append a Type-Number-Value record.

        The record is written as ``[wire_code][number][value]`` with the value
        width taken from the type registry. Header and value are written
        together or not at all.

        Args:
            tag: Value type
            number: Instance number (0-255), e.g. the sensor index
            value: Int value, or raw little-endian bytes of the type's width

        Returns:
            AppendResult.OK, UNKNOWN_TYPE for an unregistered tag, or
            CAPACITY_EXCEEDED when the whole record doesn't fit

        Raises:
            EncodeError: If number or value is invalid for the type
            UnknownTypeError: In strict mode, for an unregistered tag
            CapacityExceededError: In strict mode, when the record doesn't fit
        """
        if type_info(tag) is None:
            if self._config.strict:
                raise UnknownTypeError(tag)
            return AppendResult.UNKNOWN_TYPE
        return self.append_record(build_record(tag, number, value))

    def append_record(self, record: TnvRecord) -> AppendResult:
        """Append a pre-validated TnvRecord. See append_tnv()."""
        offset = self._cursor
        result = self._write(record.to_bytes())
        if result is AppendResult.OK and self._diagnostics.enabled:
            self._diagnostics.tnv_added(record.info, record.number, offset)
        return result

    def extend(self, records: Iterable[TnvRecord]) -> list[AppendResult]:
        """Append records one by one and return each result.

        A rejected record does not stop later, smaller records from being
        appended.
        """
        return [self.append_record(record) for record in records]

    def _append_scalar(self, value: int, width: int, signed: bool) -> AppendResult:
        offset = self._cursor
        result = self._write(pack(value, width, signed))
        if result is AppendResult.OK and self._diagnostics.enabled:
            self._diagnostics.scalar_added(value, width, signed, offset)
        return result

    def _write(self, data: bytes) -> AppendResult:
        end = self._cursor + len(data)
        if end > len(self._data):
            if self._config.strict:
                raise CapacityExceededError(len(data), self.remaining)
            return AppendResult.CAPACITY_EXCEEDED
        self._data[self._cursor : end] = data
        self._cursor = end
        return AppendResult.OK
