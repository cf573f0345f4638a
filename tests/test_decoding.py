# tests/test_decoding.py

from __future__ import annotations

import pytest

from graph_tasks.storage.decoding import Column, column_names, decode_row
from graph_tasks.tasks.errors import StorageFailError

SCHEMA = (Column("t.taskID", str), Column("t.deadline", int))


def test_column_names_from_falkordb_header() -> None:
    assert column_names([[1, "t.taskID"], [1, b"t.deadline"]]) == ["t.taskID", "t.deadline"]


def test_decode_row_returns_typed_columns() -> None:
    out = decode_row(["t.taskID", "t.deadline"], ["abc", 42], SCHEMA)
    assert out == {"t.taskID": "abc", "t.deadline": 42}


def test_decode_row_follows_header_order() -> None:
    out = decode_row(["t.deadline", "t.taskID"], [42, "abc"], SCHEMA)
    assert out == {"t.taskID": "abc", "t.deadline": 42}


def test_decode_row_missing_column() -> None:
    with pytest.raises(StorageFailError, match="t.deadline"):
        decode_row(["t.taskID"], ["abc"], SCHEMA)


def test_decode_row_short_row() -> None:
    with pytest.raises(StorageFailError, match="missing"):
        decode_row(["t.taskID", "t.deadline"], ["abc"], SCHEMA)


@pytest.mark.parametrize(
    "row",
    [
        [None, 42],
        [7, 42],
        ["abc", "42"],
        ["abc", 4.2],
        ["abc", None],
        ["abc", True],
    ],
)
def test_decode_row_type_mismatch(row) -> None:
    with pytest.raises(StorageFailError, match="expected"):
        decode_row(["t.taskID", "t.deadline"], row, SCHEMA)
