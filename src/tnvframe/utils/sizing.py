"""Payload size calculation utilities.

These functions compute encoded sizes from the type registry without
touching a buffer, so a device can plan which readings fit in an uplink.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.scalar import WIDTHS
from ..codec.tnv import HEADER_SIZE
from ..codec.types import ValueType, width_of
from ..exceptions import EncodeError, UnknownTypeError


def record_size(tag: ValueType) -> int:
    """Return the encoded size of a TNV record of type ``tag``.

    Raises:
        UnknownTypeError: If tag isn't registered

    Example:
        >>> record_size(ValueType.SOIL_TEMPERATURE)
        4
    """
    width = width_of(tag)
    if width == 0:
        raise UnknownTypeError(tag)
    return HEADER_SIZE + width


def payload_size(tags: Iterable[ValueType], scalar_widths: Iterable[int] = ()) -> int:
    """Return the size of a payload holding one record per tag plus scalars.

    Args:
        tags: Record types, one entry per record (repeat for multiple instances)
        scalar_widths: Widths of plain scalar fields (1, 2 or 4)

    Raises:
        UnknownTypeError: If any tag isn't registered
        EncodeError: If a scalar width is unsupported
    """
    total = 0
    for width in scalar_widths:
        if width not in WIDTHS:
            raise EncodeError(f"width must be one of {WIDTHS}, got {width}")
        total += width
    return total + sum(record_size(tag) for tag in tags)


def max_records(tag: ValueType, available: int) -> int:
    """Return how many records of type ``tag`` fit in ``available`` bytes.

    Example:
        >>> max_records(ValueType.SOIL_HUMIDITY, 51)
        12
    """
    if available < 0:
        raise ValueError(f"available must be >= 0, got {available}")
    return available // record_size(tag)
