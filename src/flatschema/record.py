"""Record types: the type-level schema surface and the instance-level view.

A class opts into the schema system by subclassing ``FlatRecord``.  That
single step grants both facets:

* the type-level surface provided by the ``SchemaMeta`` metaclass
  (``width``, ``pack_format``, ``fields``, ``layouts``, ``registry()``,
  ``reset_schema()``), and
* the instance-level ``SchemaView`` (``width``, ``pack_format``,
  ``fields``) which forwards every query to the owning type.

Neither facet can be attached on its own.

Example
-------
::

    from flatschema import FlatRecord

    class Person(FlatRecord):
        pass

    Person.fields.extend([name_field, age_field])
    Person.pack_format = "A10A3"
    Person.width = 13

    Person().width        # 13, read through to Person's registry

Schema values may also be given in the class body; they are moved into
the registry when the class is created::

    class Trailer(FlatRecord):
        width = 8
        pack_format = "A1A7"
        fields = [kind_field, count_field]
"""
from __future__ import annotations

from typing import Any

from flatschema.registry import SchemaRegistry, registry_for, reset_registry

_SCHEMA_ATTRIBUTES = ("width", "pack_format", "fields", "layouts")


class SchemaView:
    """Read-only schema access for record instances.

    Holds no state.  Every property reads the registry of ``type(self)``
    at call time, so changes to the type are visible on existing
    instances immediately.  Layouts are deliberately type-only.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls, SchemaMeta):
            raise TypeError(
                f"Cannot define {cls.__qualname__}: SchemaView subclasses must use "
                "the SchemaMeta metaclass. Subclass FlatRecord instead."
            )

    @property
    def width(self) -> int:
        """Line width of this record's type."""
        return registry_for(type(self)).width

    @property
    def pack_format(self) -> str:
        """Pack format of this record's type."""
        return registry_for(type(self)).pack_format

    @property
    def fields(self) -> list[Any]:
        """Field definitions of this record's type, in column order."""
        return registry_for(type(self)).fields


class SchemaMeta(type):
    """Metaclass exposing a record type's registry as class-level attributes.

    Properties defined here are visible on the class (``Person.width``)
    but not on its instances, which go through ``SchemaView`` instead.
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> "SchemaMeta":
        # Left in the class dict these would shadow SchemaView's properties on instances.
        declared = {
            key: namespace.pop(key)
            for key in _SCHEMA_ATTRIBUTES
            if key in namespace
        }
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        if not issubclass(cls, SchemaView):
            raise TypeError(
                f"Cannot define {name}: classes built by SchemaMeta must "
                "subclass SchemaView. Subclass FlatRecord instead."
            )
        if declared:
            registry = registry_for(cls)
            if "width" in declared:
                registry.set_width(declared["width"])
            if "pack_format" in declared:
                registry.set_pack_format(declared["pack_format"])
            registry.fields.extend(declared.get("fields", ()))
            registry.layouts.extend(declared.get("layouts", ()))
        return cls

    def registry(cls) -> SchemaRegistry:
        """Return this type's registry, creating it if needed."""
        return registry_for(cls)

    def reset_schema(cls) -> None:
        """Discard all schema metadata of this type.  DESTRUCTIVE; for tests."""
        reset_registry(cls)

    @property
    def width(cls) -> int:
        return registry_for(cls).width

    @width.setter
    def width(cls, value: int) -> None:
        registry_for(cls).set_width(value)

    def set_width(cls, value: int) -> None:
        registry_for(cls).set_width(value)

    @property
    def pack_format(cls) -> str:
        return registry_for(cls).pack_format

    @pack_format.setter
    def pack_format(cls, value: str) -> None:
        registry_for(cls).set_pack_format(value)

    def set_pack_format(cls, value: str) -> None:
        registry_for(cls).set_pack_format(value)

    @property
    def fields(cls) -> list[Any]:
        return registry_for(cls).fields

    @property
    def layouts(cls) -> list[Any]:
        return registry_for(cls).layouts


class FlatRecord(SchemaView, metaclass=SchemaMeta):
    """Base class for fixed-width record types."""

    __slots__ = ()


def is_record_type(obj: object) -> bool:
    """Return True if ``obj`` is a record type (a ``FlatRecord`` subclass or itself)."""
    return isinstance(obj, SchemaMeta)
