"""Little-endian TNV payload codec for tnvframe.

This module provides scalar packing, the value type registry, TNV records and
the bounded append buffer they are written into.
"""

from __future__ import annotations

from .buffer import AppendResult, FrameBuffer
from .scalar import pack, unpack, value_range
from .tnv import TnvRecord, build_record
from .types import (
    TYPE_REGISTRY,
    TypeInfo,
    ValueType,
    display_name_of,
    is_signed,
    wire_code_of,
    width_of,
)

__all__ = [
    "FrameBuffer",
    "AppendResult",
    "pack",
    "unpack",
    "value_range",
    "TnvRecord",
    "build_record",
    "ValueType",
    "TypeInfo",
    "TYPE_REGISTRY",
    "width_of",
    "wire_code_of",
    "display_name_of",
    "is_signed",
]
