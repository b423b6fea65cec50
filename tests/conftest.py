"""Shared test fixtures for flat-schema.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest

from flatschema.record import FlatRecord, SchemaMeta


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "flatschema"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def make_record() -> Callable[..., SchemaMeta]:
    """Return a factory producing brand-new, unconfigured record types."""

    def factory(name: str = "Record") -> SchemaMeta:
        return SchemaMeta(name, (FlatRecord,), {})

    return factory
