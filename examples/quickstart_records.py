#!/usr/bin/env python3
"""Example: Quickstart — flat-schema

Declare two record types for a file mixing header and detail lines,
register their fields and layouts, and print their schemas.

Usage:
    python examples/quickstart_records.py

    # or inspect a type from the command line
    flat-schema describe quickstart_records:Detail --format yaml

Requirements:
    pip install flat-schema
"""
from __future__ import annotations

from dataclasses import dataclass

import flatschema
from flatschema import FlatRecord, SchemaSerializer


@dataclass(frozen=True)
class Column:
    name: str
    width: int


@dataclass(frozen=True)
class LineShape:
    name: str
    prefix: str


class Header(FlatRecord):
    pass


class Detail(FlatRecord):
    pass


def _add_column(record_type: type[FlatRecord], column: Column) -> None:
    record_type.fields.append(column)
    record_type.width += column.width
    record_type.pack_format += f"A{column.width}"


for column in (Column("kind", 1), Column("batch", 8)):
    _add_column(Header, column)

for column in (Column("kind", 1), Column("name", 10), Column("age", 3)):
    _add_column(Detail, column)

Detail.layouts.append(LineShape("header", prefix="H"))
Detail.layouts.append(LineShape("detail", prefix="D"))


def main() -> None:
    print(f"flat-schema version: {flatschema.__version__}")

    row = Detail()
    print(f"Detail line width: {row.width}, pack format: {row.pack_format!r}")
    print(f"Header line width: {Header.width}")

    serializer = SchemaSerializer()
    print(serializer.to_yaml(Detail))


if __name__ == "__main__":
    main()
