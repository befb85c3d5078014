"""Fixed-width scalar packing.

This module converts 8/16/32-bit integers to and from their little-endian
byte sequences. Signed integers are packed as their two's complement bit
pattern, so ``pack(-1, 2, signed=True) == pack(0xFFFF, 2)``.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError

#: Byte widths supported on the wire.
WIDTHS = (1, 2, 4)

_FORMATS: dict[tuple[int, bool], str] = {
    (1, False): "<B",
    (2, False): "<H",
    (4, False): "<I",
    (1, True): "<b",
    (2, True): "<h",
    (4, True): "<i",
}


def value_range(width: int, signed: bool = False) -> tuple[int, int]:
    """Return the inclusive (min, max) range representable in ``width`` bytes.

    Args:
        width: Byte width (1, 2 or 4)
        signed: Whether the value is two's complement signed

    Raises:
        EncodeError: If width is not supported

    Example:
        >>> value_range(2, signed=True)
        (-32768, 32767)
    """
    _check_width(width)
    num_bits = width * 8
    if signed:
        return -(1 << (num_bits - 1)), (1 << (num_bits - 1)) - 1
    return 0, (1 << num_bits) - 1


def pack(value: int, width: int, signed: bool = False) -> bytes:
    """Pack an integer into ``width`` little-endian bytes.

    Args:
        value: Integer to pack
        width: Byte width (1, 2 or 4)
        signed: Pack as two's complement signed

    Returns:
        ``width`` bytes, least-significant byte first

    Raises:
        EncodeError: If width is unsupported or value doesn't fit

    Example:
        >>> pack(0x1234, 2)
        b'4\\x12'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"Expected int, got {type(value).__name__}")

    min_value, max_value = value_range(width, signed)
    if value < min_value or value > max_value:
        kind = "int" if signed else "uint"
        raise EncodeError(
            f"Value {value} doesn't fit in {kind}{width * 8} (range: {min_value} to {max_value})"
        )

    return struct.pack(_FORMATS[(width, signed)], value)


def unpack(data: bytes, signed: bool = False) -> int:
    """Unpack a little-endian integer; the width is ``len(data)``.

    Args:
        data: 1, 2 or 4 bytes
        signed: Interpret as two's complement signed

    Raises:
        EncodeError: If the length of data is not a supported width
    """
    _check_width(len(data))
    return int(struct.unpack(_FORMATS[(len(data), signed)], data)[0])


def pack_uint8(value: int) -> bytes:
    return pack(value, 1)


def pack_uint16(value: int) -> bytes:
    return pack(value, 2)


def pack_uint32(value: int) -> bytes:
    return pack(value, 4)


def pack_int8(value: int) -> bytes:
    return pack(value, 1, signed=True)


def pack_int16(value: int) -> bytes:
    return pack(value, 2, signed=True)


def pack_int32(value: int) -> bytes:
    return pack(value, 4, signed=True)


def _check_width(width: int) -> None:
    if width not in WIDTHS:
        raise EncodeError(f"width must be one of {WIDTHS}, got {width}")
