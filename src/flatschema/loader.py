"""Resolve record types from ``"package.module:ClassName"`` references."""
from __future__ import annotations

import importlib
import logging

from flatschema.errors import RecordTypeNotFoundError
from flatschema.record import SchemaMeta, is_record_type

logger = logging.getLogger(__name__)


def resolve_record_type(target: str) -> SchemaMeta:
    """Import and return the record type named by ``target``.

    Parameters
    ----------
    target:
        ``"module.path:Name"``.  The part after the colon may be a dotted
        attribute path, e.g. ``"billing.records:Invoice.Header"``.

    Returns
    -------
    SchemaMeta
        The ``FlatRecord`` subclass.

    Raises
    ------
    RecordTypeNotFoundError
        If the reference is malformed, the module cannot be imported, the
        attribute does not exist, or the object is not a record type.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise RecordTypeNotFoundError(target, "expected the form 'module:Name'")

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise RecordTypeNotFoundError(
            target, f"module {module_name!r} could not be imported ({exc})"
        ) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise RecordTypeNotFoundError(
                target, f"no attribute {part!r}"
            ) from None

    if not is_record_type(obj):
        raise RecordTypeNotFoundError(target, f"{obj!r} is not a FlatRecord subclass")

    logger.debug("Resolved %r to record type %s", target, obj.__qualname__)  # type: ignore[union-attr]
    return obj  # type: ignore[return-value]
