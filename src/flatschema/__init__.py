"""flat-schema: schema metadata for fixed-width flat-file records.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from flatschema import FlatRecord

    class Person(FlatRecord):
        pass

    Person.fields.append(name_field)
    Person.fields.append(age_field)
    Person.pack_format = "A10A3"
    Person.width = 13

    Person().width            # 13
    Person.reset_schema()     # back to the unconfigured state

    flatschema.__version__
    '0.1.0'
"""
from __future__ import annotations

from flatschema.errors import (
    InvalidPackFormatError,
    InvalidWidthError,
    RecordTypeNotFoundError,
    SchemaError,
)
from flatschema.loader import resolve_record_type
from flatschema.record import FlatRecord, SchemaMeta, SchemaView, is_record_type
from flatschema.registry import (
    SchemaRegistry,
    SchemaSnapshot,
    registry_for,
    reset_registry,
)
from flatschema.serializer import SchemaSerializer, describe

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    "FlatRecord",
    "InvalidPackFormatError",
    "InvalidWidthError",
    "RecordTypeNotFoundError",
    "SchemaError",
    "SchemaMeta",
    "SchemaRegistry",
    "SchemaSerializer",
    "SchemaSnapshot",
    "SchemaView",
    "describe",
    "is_record_type",
    "registry_for",
    "reset_registry",
    "resolve_record_type",
]
