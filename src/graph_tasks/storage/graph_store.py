# src/graph_tasks/storage/graph_store.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from redis.exceptions import RedisError

from ..core.ports import GraphClient, QueryResult
from ..tasks.errors import StorageCommitError, StorageFailError, TaskNotFoundError
from ..tasks.task_models import Report, Task, from_epoch_seconds, to_epoch_seconds
from .decoding import Column, column_names, decode_row

logger = logging.getLogger(__name__)

TASK_LABEL = "Task"
REPORT_LABEL = "Report"
DONE_EDGE = "DONE"

TASK_ID_PROPERTY = "taskID"
TASK_AUTHOR_PROPERTY = "author"
TASK_COMMENT_PROPERTY = "comment"
TASK_DEADLINE_PROPERTY = "deadline"
REPORT_BY_PROPERTY = "by"
REPORT_AT_PROPERTY = "at"

TASK_COLUMNS = (
    Column(f"t.{TASK_ID_PROPERTY}", str),
    Column(f"t.{TASK_AUTHOR_PROPERTY}", str),
    Column(f"t.{TASK_COMMENT_PROPERTY}", str),
    Column(f"t.{TASK_DEADLINE_PROPERTY}", int),
)

REPORT_COLUMNS = (
    Column(f"r.{REPORT_BY_PROPERTY}", str),
    Column(f"r.{REPORT_AT_PROPERTY}", int),
)

COUNT_COLUMN = Column("count(t)", int)

_TASK_RETURN = ", ".join(col.name for col in TASK_COLUMNS)

ADD_TASK_QUERY = (
    f"CREATE (:{TASK_LABEL} {{"
    f"{TASK_ID_PROPERTY}: $task_id, "
    f"{TASK_AUTHOR_PROPERTY}: $author, "
    f"{TASK_COMMENT_PROPERTY}: $comment, "
    f"{TASK_DEADLINE_PROPERTY}: $deadline}})"
)

GET_TASK_QUERY = (
    f"MATCH (t:{TASK_LABEL}) "
    f"WHERE t.{TASK_ID_PROPERTY} = $task_id "
    f"RETURN {_TASK_RETURN}"
)

ALL_TASKS_QUERY = f"MATCH (t:{TASK_LABEL}) RETURN {_TASK_RETURN}"

# MATCH-then-CREATE: no row comes back when the task is missing.
DONE_TASK_QUERY = (
    f"MATCH (t:{TASK_LABEL}) "
    f"WHERE t.{TASK_ID_PROPERTY} = $task_id "
    f"CREATE (t)-[:{DONE_EDGE}]->(r:{REPORT_LABEL} "
    f"{{{REPORT_BY_PROPERTY}: $task_doer, {REPORT_AT_PROPERTY}: $now}}) "
    f"RETURN t.{TASK_ID_PROPERTY}"
)

TASK_REPORTS_QUERY = (
    f"MATCH (t:{TASK_LABEL})-[:{DONE_EDGE}]->(r:{REPORT_LABEL}) "
    f"WHERE t.{TASK_ID_PROPERTY} = $task_id "
    f"RETURN r.{REPORT_BY_PROPERTY}, r.{REPORT_AT_PROPERTY}"
)

COUNT_TASKS_QUERY = f"MATCH (t:{TASK_LABEL}) RETURN count(t)"


def _epoch_column(cols: dict[str, Any], name: str) -> datetime:
    # An int column may still be outside the range datetime can represent.
    try:
        return from_epoch_seconds(cols[name])
    except (ValueError, OverflowError, OSError) as exc:
        raise StorageFailError(f"column {name}: {exc}") from exc


def _row_to_task(names: list[str], row: list[Any]) -> Task:
    cols = decode_row(names, row, TASK_COLUMNS)
    return Task(
        id=cols[f"t.{TASK_ID_PROPERTY}"],
        author=cols[f"t.{TASK_AUTHOR_PROPERTY}"],
        comment=cols[f"t.{TASK_COMMENT_PROPERTY}"],
        deadline=_epoch_column(cols, f"t.{TASK_DEADLINE_PROPERTY}"),
    )


def _row_to_report(names: list[str], row: list[Any]) -> Report:
    cols = decode_row(names, row, REPORT_COLUMNS)
    return Report(
        by=cols[f"r.{REPORT_BY_PROPERTY}"],
        at=_epoch_column(cols, f"r.{REPORT_AT_PROPERTY}"),
    )


class GraphTaskStore:
    """
    Property-graph task store.

    Mapping:
    - one (:Task {taskID, author, comment, deadline}) node per task
    - (:Task)-[:DONE]->(:Report {by, at}) per completion report
    - times are stored as integer epoch seconds

    Implements both TaskStorage and TaskLister. The graph handle is injected;
    the store never opens connections of its own.
    """

    def __init__(self, graph: GraphClient, *, query_timeout_ms: int | None = None) -> None:
        self._graph = graph
        self._timeout = query_timeout_ms or None
        try:
            total = self.count_tasks()
        except (StorageCommitError, StorageFailError):
            logger.warning("Could not count tasks on startup.", exc_info=True)
            total = -1
        logger.info("GraphTaskStore ready total=%s", total)

    # ---- low-level helpers ----

    def _query(self, q: str, params: dict[str, Any] | None = None) -> QueryResult:
        try:
            return self._graph.query(q, params, timeout=self._timeout)
        except RedisError as exc:
            logger.warning("Graph query failed: %s", exc)
            raise StorageCommitError(f"graph.query: {exc}") from exc

    # ---- TaskStorage ----

    def add(self, task: Task) -> None:
        self._query(
            ADD_TASK_QUERY,
            {
                "task_id": task.id,
                "author": task.author,
                "comment": task.comment,
                "deadline": to_epoch_seconds(task.deadline),
            },
        )
        logger.debug("Task added id=%s author=%s", task.id, task.author)

    def get(self, task_id: str) -> Task:
        result = self._query(GET_TASK_QUERY, {"task_id": task_id})
        if not result.result_set:
            raise TaskNotFoundError(task_id)
        if len(result.result_set) > 1:
            logger.warning("Multiple task nodes share id=%s; using the first.", task_id)
        return _row_to_task(column_names(result.header), result.result_set[0])

    def done(self, task_id: str, report: Report) -> None:
        result = self._query(
            DONE_TASK_QUERY,
            {
                "task_id": task_id,
                "task_doer": report.by,
                "now": to_epoch_seconds(report.at),
            },
        )
        if not result.result_set:
            raise TaskNotFoundError(task_id)
        logger.debug("Task done id=%s by=%s", task_id, report.by)

    def reports_for(self, task_id: str) -> list[Report]:
        result = self._query(TASK_REPORTS_QUERY, {"task_id": task_id})
        names = column_names(result.header)
        return [_row_to_report(names, row) for row in result.result_set]

    # ---- TaskLister ----

    def all(self) -> list[Task]:
        result = self._query(ALL_TASKS_QUERY)
        names = column_names(result.header)
        # One bad row fails the whole listing.
        return [_row_to_task(names, row) for row in result.result_set]

    def of_author(self, author: str) -> list[Task]:
        return []

    def done_by(self, doer: str) -> list[Task]:
        return []

    # ---- misc ----

    def count_tasks(self) -> int:
        result = self._query(COUNT_TASKS_QUERY)
        if not result.result_set:
            return 0
        cols = decode_row(column_names(result.header), result.result_set[0], (COUNT_COLUMN,))
        return cols[COUNT_COLUMN.name]
