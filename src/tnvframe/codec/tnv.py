"""Type-Number-Value records.

A TNV record is laid out on the wire as::

    [wire_code: 1 byte][number: 1 byte][value: width_of(type) bytes]

The value width is implied by the type, so records carry no length byte.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..exceptions import EncodeError
from .scalar import pack
from .types import TypeInfo, ValueType, type_info

#: Bytes taken by the type and number fields.
HEADER_SIZE = 2


class TnvRecord(BaseModel):
    """A validated TNV record.

    ``value`` is either an int, packed using the registered width and
    signedness of ``type``, or raw bytes already laid out little-endian.

    Prefer build_record(), which reports invalid records as EncodeError.

    Example:
        >>> record = build_record(ValueType.VOLUMETRIC_WATER_CONTENT, 3, 500)
        >>> record.to_bytes().hex()
        '0303f401'
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    type: ValueType
    number: int = Field(ge=0, le=255)
    value: Union[int, bytes]

    @model_validator(mode="after")
    def check_value(self) -> TnvRecord:
        info = self.info
        if isinstance(self.value, bytes):
            if len(self.value) != info.width:
                raise ValueError(
                    f"{self.type.name} needs {info.width} value bytes, got {len(self.value)}"
                )
        else:
            # Raises EncodeError on range violations
            pack(self.value, info.width, info.signed)
        return self

    @property
    def info(self) -> TypeInfo:
        info = type_info(self.type)
        if info is None:
            raise ValueError(f"{self.type.name} has no registry entry")
        return info

    @property
    def size(self) -> int:
        """Encoded record size in bytes (header plus value)."""
        return HEADER_SIZE + self.info.width

    def value_bytes(self) -> bytes:
        """Return the value laid out little-endian."""
        if isinstance(self.value, bytes):
            return self.value
        info = self.info
        return pack(self.value, info.width, info.signed)

    def to_bytes(self) -> bytes:
        """Return the complete record as it appears on the wire."""
        return bytes((self.info.wire_code, self.number)) + self.value_bytes()


def build_record(tag: ValueType, number: int, value: int | bytes) -> TnvRecord:
    """Build a TnvRecord, raising EncodeError for anything invalid.

    Args:
        tag: Registered value type
        number: Instance number (0-255)
        value: Int value or raw little-endian value bytes

    Raises:
        EncodeError: If any field is invalid
    """
    if isinstance(value, (bytearray, memoryview)):
        value = bytes(value)
    try:
        return TnvRecord(type=tag, number=number, value=value)
    except ValidationError as err:
        raise EncodeError(f"Invalid TNV record: {_first_error(err)}") from err


def _first_error(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    msg = first["msg"]
    return f"{loc}: {msg}" if loc else msg
