# src/graph_tasks/core/ports.py

"""
Ports (interfaces) used by the core.

The service depends on Protocols instead of concrete implementations.
TaskStorage and TaskLister are separate capability sets so callers can ask
for the narrowest one they need; GraphTaskStore happens to satisfy both.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..tasks.task_models import Report, Task


class QueryResult(Protocol):
    """
    Shape of a graph query result (falkordb.QueryResult-compatible).

    header:     list of [column_type, column_name] pairs
    result_set: list of rows, each a list of untyped values
    """

    header: list[Any]
    result_set: list[list[Any]]


class GraphClient(Protocol):
    """A single named graph accepting parameterized Cypher queries."""

    def query(
            self,
            q: str,
            params: dict[str, Any] | None = None,
            timeout: int | None = None,
    ) -> QueryResult: ...


class TaskStorage(Protocol):
    def add(self, task: Task) -> None: ...
    def get(self, task_id: str) -> Task: ...
    def done(self, task_id: str, report: Report) -> None: ...
    def reports_for(self, task_id: str) -> list[Report]: ...


class TaskLister(Protocol):
    def all(self) -> list[Task]: ...
    def of_author(self, author: str) -> list[Task]: ...
    def done_by(self, doer: str) -> list[Task]: ...
