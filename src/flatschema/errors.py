"""Error types raised by flat-schema.

Queries against a record type's schema never raise: an unconfigured type
simply reports its default values.  Errors are limited to assignments of
ill-typed values and to resolving record types by name.
"""
from __future__ import annotations

from typing import Any


class SchemaError(Exception):
    """Base class for every error raised by this package."""


class InvalidWidthError(SchemaError, ValueError):
    """Raised when a record type's width is set to a negative or non-int value."""

    def __init__(self, record_name: str, value: Any) -> None:
        self.record_name = record_name
        self.value = value
        super().__init__(
            f"Cannot set width of {record_name!r} to {value!r}: "
            "width must be a non-negative integer."
        )


class InvalidPackFormatError(SchemaError, TypeError):
    """Raised when a record type's pack format is set to a non-string value."""

    def __init__(self, record_name: str, value: Any) -> None:
        self.record_name = record_name
        self.value = value
        super().__init__(
            f"Cannot set pack_format of {record_name!r} to {value!r}: "
            f"expected str, got {type(value).__name__}."
        )


class RecordTypeNotFoundError(SchemaError, LookupError):
    """Raised when a ``"module:Name"`` reference does not name a record type."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot resolve record type {target!r}: {reason}")
