"""Value type registry for TNV records.

Each ValueType maps to a TypeInfo carrying the byte actually transmitted
(the wire code), the implicit value width and its signedness. The wire code is
held separately from the enum member value: reordering or renumbering the enum
must never change what goes over the air.

To add a type, add an enum member and a TYPE_REGISTRY entry with a new,
unused wire code. The receiver needs the same entry.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..exceptions import UnknownTypeError
from .scalar import WIDTHS


class ValueType(enum.Enum):
    """Symbolic value types carried in TNV records."""

    VERSION = enum.auto()
    SOIL_TEMPERATURE = enum.auto()
    SOIL_HUMIDITY = enum.auto()
    VOLUMETRIC_WATER_CONTENT = enum.auto()


@dataclass(frozen=True)
class TypeInfo:
    """Wire properties of a value type.

    Attributes:
        wire_code: Byte transmitted as the record type (0-255)
        width: Value width in bytes (1, 2 or 4)
        signed: Whether the value is two's complement signed
        display_name: Name used in diagnostics output
    """

    wire_code: int
    width: int
    signed: bool
    display_name: str


TYPE_REGISTRY: dict[ValueType, TypeInfo] = {
    ValueType.VERSION: TypeInfo(0x00, 1, False, "ValueType.VERSION"),
    ValueType.SOIL_TEMPERATURE: TypeInfo(0x01, 2, True, "ValueType.SOIL_TEMPERATURE"),
    ValueType.SOIL_HUMIDITY: TypeInfo(0x02, 2, False, "ValueType.SOIL_HUMIDITY"),
    ValueType.VOLUMETRIC_WATER_CONTENT: TypeInfo(
        0x03, 2, False, "ValueType.VOLUMETRIC_WATER_CONTENT"
    ),
}

_BY_WIRE_CODE: dict[int, ValueType] = {}


def _build_wire_index() -> None:
    for tag, info in TYPE_REGISTRY.items():
        if not 0 <= info.wire_code <= 0xFF:
            raise ValueError(f"{tag.name}: wire code {info.wire_code} is not a byte")
        if info.width not in WIDTHS:
            raise ValueError(f"{tag.name}: width must be one of {WIDTHS}, got {info.width}")
        if info.wire_code in _BY_WIRE_CODE:
            raise ValueError(
                f"{tag.name}: wire code 0x{info.wire_code:02X} already used by "
                f"{_BY_WIRE_CODE[info.wire_code].name}"
            )
        _BY_WIRE_CODE[info.wire_code] = tag


_build_wire_index()


def type_info(tag: object) -> TypeInfo | None:
    """Return the registry entry for ``tag``, or None if it isn't registered."""
    if not isinstance(tag, ValueType):
        return None
    return TYPE_REGISTRY.get(tag)


def width_of(tag: object) -> int:
    """Return the value width in bytes, or 0 for an unknown tag.

    Example:
        >>> width_of(ValueType.SOIL_HUMIDITY)
        2
        >>> width_of(0x7F)
        0
    """
    info = type_info(tag)
    return info.width if info is not None else 0


def wire_code_of(tag: object) -> int:
    """Return the transmitted type byte for ``tag``.

    Raises:
        UnknownTypeError: If tag isn't registered
    """
    info = type_info(tag)
    if info is None:
        raise UnknownTypeError(tag)
    return info.wire_code


def display_name_of(tag: object) -> str:
    info = type_info(tag)
    return info.display_name if info is not None else "Unknown"


def is_signed(tag: object) -> bool:
    info = type_info(tag)
    return info.signed if info is not None else False


def lookup_wire_code(code: int) -> ValueType | None:
    """Map a transmitted type byte back to its ValueType."""
    return _BY_WIRE_CODE.get(code)


def lookup_name(name: str) -> ValueType | None:
    """Find a ValueType by member name, case-insensitive.

    Accepts both ``"soil_humidity"`` and ``"ValueType.SOIL_HUMIDITY"``.
    """
    key = name.strip().upper()
    if key.startswith("VALUETYPE."):
        key = key[len("VALUETYPE.") :]
    try:
        return ValueType[key]
    except KeyError:
        return None
