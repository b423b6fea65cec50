"""Unit tests for flatschema.cli.main — describe and version commands."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass

import pytest
from click.testing import CliRunner

from flatschema.cli.main import cli
from flatschema.record import FlatRecord


@dataclass(frozen=True)
class FieldDef:
    name: str
    width: int


class Person(FlatRecord):
    pass


class Blank(FlatRecord):
    pass


class Shape:
    def __init__(self, label: str) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"<Shape {self.label}>"


class Marked(FlatRecord):
    layouts = [Shape("[detail]")]
    pack_format = "[bold]A5"


class Unbalanced(FlatRecord):
    layouts = [Shape("[/x]")]


@pytest.fixture(autouse=True)
def _configure_person() -> Iterator[None]:
    Person.reset_schema()
    Person.fields.append(FieldDef("name", 10))
    Person.fields.append(FieldDef("age", 3))
    Person.layouts.append("detail")
    Person.pack_format = "A10A3"
    Person.width = 13
    yield
    Person.reset_schema()


def _make_runner() -> CliRunner:
    return CliRunner()


class TestDescribeCommand:
    def test_table_output(self) -> None:
        result = _make_runner().invoke(cli, ["describe", f"{__name__}:Person"])
        assert result.exit_code == 0, result.output
        assert "Person" in result.output
        assert "13" in result.output
        assert "A10A3" in result.output
        assert "name='name'" in result.output
        assert "detail" in result.output

    def test_table_output_for_unconfigured_type(self) -> None:
        result = _make_runner().invoke(cli, ["describe", f"{__name__}:Blank"])
        assert result.exit_code == 0, result.output
        assert "No fields registered." in result.output
        assert "No layouts registered." in result.output

    def test_json_output(self) -> None:
        result = _make_runner().invoke(
            cli, ["describe", f"{__name__}:Person", "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["width"] == 13
        assert data["pack_format"] == "A10A3"
        assert [f["name"] for f in data["fields"]] == ["name", "age"]
        assert data["layouts"] == ["detail"]

    def test_yaml_output(self) -> None:
        result = _make_runner().invoke(
            cli, ["describe", f"{__name__}:Person", "--format", "yaml"]
        )
        assert result.exit_code == 0, result.output
        assert "pack_format" in result.output
        assert "A10A3" in result.output

    def test_unknown_target_exits_with_error(self) -> None:
        result = _make_runner().invoke(cli, ["describe", f"{__name__}:Nobody"])
        assert result.exit_code == 1

    def test_bracketed_repr_shown_verbatim(self) -> None:
        result = _make_runner().invoke(cli, ["describe", f"{__name__}:Marked"])
        assert result.exit_code == 0, result.output
        assert "<Shape [detail]>" in result.output
        assert "[bold]A5" in result.output

    def test_closing_tag_in_repr_does_not_crash(self) -> None:
        result = _make_runner().invoke(cli, ["describe", f"{__name__}:Unbalanced"])
        assert result.exit_code == 0, result.output
        assert "<Shape [/x]>" in result.output

    def test_malformed_target_exits_with_error(self) -> None:
        result = _make_runner().invoke(cli, ["describe", "not-a-reference"])
        assert result.exit_code == 1

    def test_invalid_format_rejected(self) -> None:
        result = _make_runner().invoke(
            cli, ["describe", f"{__name__}:Person", "--format", "xml"]
        )
        assert result.exit_code == 2

    def test_verbose_flag_enables_debug_logging(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = _make_runner().invoke(
            cli, ["--verbose", "describe", f"{__name__}:Person", "--format", "json"]
        )
        assert result.exit_code == 0
        assert calls == [{"level": logging.DEBUG}]


class TestVersionCommand:
    def test_version_command(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output
