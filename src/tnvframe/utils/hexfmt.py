"""Hex rendering for payload bytes."""

from __future__ import annotations


def to_hex(data: bytes) -> str:
    """Render bytes as uppercase two-digit hex with no separators.

    This is the form LoRaWAN network servers and AT-command modems expect
    for an uplink payload.

    Example:
        >>> to_hex(b"\\x34\\x12\\x03")
        '341203'
    """
    return bytes(data).hex().upper()


def format_hex(data: bytes) -> str:
    """Render bytes as a spaced ``0xNN`` listing for console output.

    Example:
        >>> format_hex(b"\\x34\\x12")
        '0x34 0x12'
    """
    return " ".join(f"0x{byte:02X}" for byte in data)


def hex_into(data: bytes, out: bytearray) -> int:
    """Write the uppercase hex form of ``data`` into a caller-owned buffer.

    Mirrors the fixed-buffer API on devices: nothing is written unless the
    hex text plus a trailing NUL fits in ``out``.

    Args:
        data: Bytes to render
        out: Destination buffer

    Returns:
        Number of hex characters written (excluding the NUL), or 0 when out
        is too small
    """
    needed = len(data) * 2 + 1
    if len(out) < needed:
        return 0
    text = to_hex(data).encode("ascii")
    out[: len(text)] = text
    out[len(text)] = 0
    return len(text)
