# src/graph_tasks/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem errors."""


class StorageCommitError(TaskError):
    """The graph backend was unreachable or rejected a query."""


class StorageFailError(TaskError):
    """A result row could not be decoded (missing column or wrong type)."""


class TaskNotFoundError(TaskError, LookupError):
    """No task node matched the given identifier."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"there is no task with id={task_id}")
        self.task_id = task_id
