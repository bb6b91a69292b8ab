"""Presence checks for named values."""

from collections.abc import Iterable
from typing import Any

from asana_pr_link.exceptions import MissingFieldsError


def find_missing_fields(fields: Iterable[tuple[str, Any]]) -> list[str]:
    """Return the names whose values are falsy, in input order."""
    return [name for name, value in fields if not value]


def validate_fields(fields: Iterable[tuple[str, Any]]) -> None:
    """Require every value in ``fields`` to be truthy.

    Empty strings, ``None``, ``0`` and ``False`` all count as missing.
    Every missing name is collected before failing so a single run
    reports the complete list.

    Args:
        fields: ``(name, value)`` pairs to check

    Raises:
        MissingFieldsError: If at least one value is falsy
    """
    missing = find_missing_fields(fields)
    if missing:
        raise MissingFieldsError(missing)
