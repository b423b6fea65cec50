"""Per-type schema metadata for fixed-width record types.

Every record type owns exactly one ``SchemaRegistry`` holding four slots:

``width``
    Total length of one encoded line.  Independent of the field widths;
    callers may assign or adjust it freely.
``pack_format``
    Opaque format string consumed by the pack/unpack codec.
``fields``
    Ordered field definitions.  Order is column order.
``layouts``
    Ordered layout definitions (alternate line shapes).

The registry is attached to the class object itself and created on first
access, so reads on an unconfigured type return the defaults instead of
failing.  ``reset_registry`` drops it again.

Example
-------
::

    from flatschema.registry import registry_for, reset_registry

    registry = registry_for(Person)
    registry.fields.append(name_field)
    registry.width += 10
    reset_registry(Person)   # back to width 0, empty fields
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from flatschema.errors import InvalidPackFormatError, InvalidWidthError

logger = logging.getLogger(__name__)

# Looked up in the class __dict__ only, so subclasses never share a parent's registry.
REGISTRY_ATTRIBUTE = "__flat_schema__"


@dataclass(frozen=True, slots=True)
class SchemaSnapshot:
    """Immutable copy of a registry's state at one point in time.

    Parameters
    ----------
    name:
        Qualified name of the record type.
    width:
        Line width at snapshot time.
    pack_format:
        Pack format at snapshot time.
    fields:
        Field definitions, in column order.
    layouts:
        Layout definitions, in declaration order.
    """

    name: str
    width: int
    pack_format: str
    fields: tuple[Any, ...]
    layouts: tuple[Any, ...]


class SchemaRegistry:
    """Mutable schema metadata for one record type.

    Parameters
    ----------
    name:
        Human-readable name of the owning record type (used in error
        messages and logs).
    """

    __slots__ = ("_name", "_width", "_pack_format", "_fields", "_layouts")

    def __init__(self, name: str) -> None:
        self._name = name
        self._width = 0
        self._pack_format = ""
        self._fields: list[Any] = []
        self._layouts: list[Any] = []

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Width
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        """Total width of one encoded line."""
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self.set_width(value)

    def set_width(self, value: int) -> None:
        """Set the line width.

        No check is made against the widths of the registered fields.

        Raises
        ------
        InvalidWidthError
            If ``value`` is not an ``int`` or is negative.
        """
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidWidthError(self._name, value)
        self._width = value

    # ------------------------------------------------------------------
    # Pack format
    # ------------------------------------------------------------------

    @property
    def pack_format(self) -> str:
        """Format string handed to the pack/unpack codec."""
        return self._pack_format

    @pack_format.setter
    def pack_format(self, value: str) -> None:
        self.set_pack_format(value)

    def set_pack_format(self, value: str) -> None:
        """Set the pack format.

        Raises
        ------
        InvalidPackFormatError
            If ``value`` is not a ``str``.
        """
        if not isinstance(value, str):
            raise InvalidPackFormatError(self._name, value)
        self._pack_format = value

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    @property
    def fields(self) -> list[Any]:
        """The live list of field definitions.  Appending to it registers a field."""
        return self._fields

    @property
    def layouts(self) -> list[Any]:
        """The live list of layout definitions."""
        return self._layouts

    def snapshot(self) -> SchemaSnapshot:
        """Return an immutable copy of the current state."""
        return SchemaSnapshot(
            name=self._name,
            width=self._width,
            pack_format=self._pack_format,
            fields=tuple(self._fields),
            layouts=tuple(self._layouts),
        )

    def __repr__(self) -> str:
        return (
            f"SchemaRegistry(name={self._name!r}, width={self._width}, "
            f"pack_format={self._pack_format!r}, fields={len(self._fields)}, "
            f"layouts={len(self._layouts)})"
        )


def registry_for(record_type: type) -> SchemaRegistry:
    """Return the registry of ``record_type``, creating it on first access.

    Every call for the same type returns the same instance until
    ``reset_registry`` is called.
    """
    registry = record_type.__dict__.get(REGISTRY_ATTRIBUTE)
    if registry is None:
        registry = SchemaRegistry(record_type.__qualname__)
        setattr(record_type, REGISTRY_ATTRIBUTE, registry)
        logger.debug("Created schema registry for %s", record_type.__qualname__)
    return registry


def reset_registry(record_type: type) -> None:
    """Discard all schema metadata of ``record_type``.

    DESTRUCTIVE.  Meant for test setup and teardown.  Resetting a type that
    was never configured does nothing.
    """
    if REGISTRY_ATTRIBUTE in record_type.__dict__:
        delattr(record_type, REGISTRY_ATTRIBUTE)
        logger.debug("Reset schema registry for %s", record_type.__qualname__)
