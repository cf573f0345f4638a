# src/graph_tasks/storage/decoding.py

"""
Strict decoding of untyped graph query rows.

Every value returned by the graph engine is untyped. A Column schema lists
the projected columns and the Python type each must have; decode_row either
returns every column checked or raises StorageFailError. Nothing is ever
defaulted.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..tasks.errors import StorageFailError


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    kind: type


def column_names(header: Sequence[Any]) -> list[str]:
    """Column names from a falkordb header ([column_type, name] pairs)."""
    names: list[str] = []
    for entry in header:
        name = entry[1]
        if isinstance(name, bytes):
            name = name.decode("utf-8")
        names.append(str(name))
    return names


def _matches(value: Any, kind: type) -> bool:
    # bool is an int subclass; a boolean property is never a valid integer column.
    if kind is int and isinstance(value, bool):
        return False
    return isinstance(value, kind)


def decode_row(
    names: Sequence[str],
    row: Sequence[Any],
    schema: Sequence[Column],
) -> dict[str, Any]:
    """
    Check one result row against the schema.

    names: column names of the result, in row order (see column_names).
    """
    index = {name: i for i, name in enumerate(names)}
    out: dict[str, Any] = {}
    for col in schema:
        i = index.get(col.name)
        if i is None or i >= len(row):
            raise StorageFailError(f"column {col.name} is missing from the result")
        value = row[i]
        if not _matches(value, col.kind):
            raise StorageFailError(
                f"column {col.name}: expected {col.kind.__name__}, "
                f"got {type(value).__name__}"
            )
        out[col.name] = value
    return out
