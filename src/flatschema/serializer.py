"""Schema description export for record types.

Renders a record type's schema (width, pack format, fields, layouts) as a
plain dict that maps naturally to JSON and YAML.  Field and layout
definitions are opaque to this package, so they are rendered on a best
effort basis:

* dataclass instances via ``dataclasses.asdict``
* objects with a callable ``to_dict()`` via that method
* ``None``, ``str``, ``int``, ``float`` and ``bool`` as-is
* anything else via ``repr()``

Export only: opaque definitions cannot be rebuilt from their description.

Usage
-----
::

    from flatschema.serializer import SchemaSerializer

    serializer = SchemaSerializer()
    data = serializer.to_dict(Person)
    print(serializer.to_yaml(Person))
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any

import yaml

from flatschema.registry import SchemaSnapshot, registry_for

_SCALARS = (str, int, float, bool)


class SchemaSerializer:
    """Converts a record type's schema into plain Python data."""

    def to_dict(self, record_type: type) -> dict[str, object]:
        """Describe ``record_type`` as a JSON-compatible dict."""
        return self.snapshot_to_dict(registry_for(record_type).snapshot())

    def snapshot_to_dict(self, snapshot: SchemaSnapshot) -> dict[str, object]:
        return {
            "kind": "RecordSchema",
            "name": snapshot.name,
            "width": snapshot.width,
            "pack_format": snapshot.pack_format,
            "fields": [self._definition_to_data(f) for f in snapshot.fields],
            "layouts": [self._definition_to_data(layout) for layout in snapshot.layouts],
        }

    def to_json(self, record_type: type, indent: int = 2) -> str:
        return json.dumps(self.to_dict(record_type), indent=indent)

    def to_yaml(self, record_type: type) -> str:
        return yaml.safe_dump(
            self.to_dict(record_type), sort_keys=False, default_flow_style=False
        )

    def _definition_to_data(self, definition: Any) -> object:
        if definition is None or isinstance(definition, _SCALARS):
            return definition
        if dataclasses.is_dataclass(definition) and not isinstance(definition, type):
            return self._jsonable(dataclasses.asdict(definition))
        to_dict = getattr(definition, "to_dict", None)
        if callable(to_dict):
            return self._jsonable(to_dict())
        return repr(definition)

    def _jsonable(self, value: Any) -> object:
        if value is None or isinstance(value, _SCALARS):
            return value
        if isinstance(value, dict):
            return {str(k): self._jsonable(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._jsonable(v) for v in value]
        return repr(value)


def describe(record_type: type) -> dict[str, object]:
    """Shortcut for ``SchemaSerializer().to_dict(record_type)``."""
    return SchemaSerializer().to_dict(record_type)
