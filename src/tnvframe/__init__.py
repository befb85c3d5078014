"""tnvframe: Compact TNV payload encoder

A Python library for packing fixed-width sensor readings into small uplink
payloads, such as LoRaWAN frames limited to a few dozen bytes. Values are
written little-endian, either as plain scalars whose layout the receiver knows
in advance, or as self-describing Type-Number-Value records.

Key Features:
- Bounded buffer with all-or-nothing appends (no partial writes, ever)
- Type registry mapping symbolic types to wire codes and value widths
- Explicit append results instead of silently dropped readings
- Optional TTN JavaScript decoder snippets generated while encoding

Quick Start:
    >>> from tnvframe import FrameBuffer, ValueType
    >>>
    >>> frame = FrameBuffer()
    >>> frame.append_uint8(1)
    <AppendResult.OK: 'ok'>
    >>> frame.append_tnv(ValueType.SOIL_TEMPERATURE, 0, -125)
    <AppendResult.OK: 'ok'>
    >>> frame.append_tnv(ValueType.VOLUMETRIC_WATER_CONTENT, 3, 500)
    <AppendResult.OK: 'ok'>
    >>> frame.hex()
    '01010083FF0303F401'
"""

from __future__ import annotations

from .codec import (
    TYPE_REGISTRY,
    AppendResult,
    FrameBuffer,
    TnvRecord,
    TypeInfo,
    ValueType,
    build_record,
    display_name_of,
    is_signed,
    pack,
    unpack,
    value_range,
    width_of,
    wire_code_of,
)
from .config import FrameConfig
from .diagnostics import DiagnosticsEmitter, LoggingSink, StreamSink, null_sink
from .exceptions import (
    CapacityExceededError,
    ConfigError,
    EncodeError,
    TnvFrameError,
    UnknownTypeError,
)
from .utils import format_hex, max_records, payload_size, record_size, to_hex

__version__ = "0.1.0"

__all__ = [
    # Core API
    "FrameBuffer",
    "FrameConfig",
    "AppendResult",
    # Records and types
    "TnvRecord",
    "build_record",
    "ValueType",
    "TypeInfo",
    "TYPE_REGISTRY",
    "width_of",
    "wire_code_of",
    "display_name_of",
    "is_signed",
    # Scalars
    "pack",
    "unpack",
    "value_range",
    # Diagnostics
    "DiagnosticsEmitter",
    "StreamSink",
    "LoggingSink",
    "null_sink",
    # Exceptions
    "TnvFrameError",
    "ConfigError",
    "EncodeError",
    "CapacityExceededError",
    "UnknownTypeError",
    # Utilities
    "to_hex",
    "format_hex",
    "record_size",
    "payload_size",
    "max_records",
    # Version
    "__version__",
]
