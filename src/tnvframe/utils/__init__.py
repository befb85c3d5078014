"""Utility functions for tnvframe.

This module provides hex rendering and payload size calculation.
"""

from __future__ import annotations

from .hexfmt import format_hex, hex_into, to_hex
from .sizing import max_records, payload_size, record_size

__all__ = [
    # Hex rendering
    "to_hex",
    "format_hex",
    "hex_into",
    # Sizing functions
    "record_size",
    "payload_size",
    "max_records",
]
