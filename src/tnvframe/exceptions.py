"""Exception hierarchy for tnvframe.

All exceptions inherit from TnvFrameError for easy catching of any
tnvframe-specific error.
"""

from __future__ import annotations


class TnvFrameError(Exception):
    """Base exception for all tnvframe errors."""

    pass


class ConfigError(TnvFrameError):
    """Raised when a frame configuration is invalid.

    Examples:
        - Capacity outside 1-255
        - Non-boolean diagnostics flag
    """

    pass


class EncodeError(TnvFrameError):
    """Raised when a value cannot be encoded at the call boundary.

    Nothing is written to the buffer when this is raised.

    Examples:
        - Value out of range for the requested width
        - Width other than 1, 2 or 4
        - Instance number outside 0-255
        - Raw value bytes not matching the type width
    """

    pass


class CapacityExceededError(EncodeError):
    """Raised in strict mode when an append would overrun the buffer.

    Attributes:
        required: Number of bytes the append needed
        remaining: Number of bytes that were still free
    """

    def __init__(self, required: int, remaining: int) -> None:
        super().__init__(
            f"Append needs {required} bytes but only {remaining} bytes remain"
        )
        self.required = required
        self.remaining = remaining


class UnknownTypeError(EncodeError):
    """Raised when a type tag is not present in the type registry."""

    def __init__(self, tag: object) -> None:
        super().__init__(f"Unknown value type: {tag!r}")
        self.tag = tag
