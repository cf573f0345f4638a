# src/graph_tasks/core/service.py

from __future__ import annotations

import logging
from datetime import datetime

from ..tasks.task_models import Report, Task, build_task
from .ports import TaskLister, TaskStorage

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task lifecycle operations.

    Delegates to storage/lister; the only thing it adds is id generation for
    new tasks. Storage errors propagate unchanged.
    """

    def __init__(self, storage: TaskStorage, lister: TaskLister) -> None:
        self.storage = storage
        self.lister = lister

    def new_task(self, author: str, comment: str, deadline: datetime) -> str:
        task = build_task(author, comment, deadline)
        self.storage.add(task)
        logger.info("New task id=%s author=%s", task.id, author)
        return task.id

    def task_with_id(self, task_id: str) -> Task:
        return self.storage.get(task_id)

    def done_task(self, task_id: str, report: Report) -> None:
        self.storage.done(task_id, report)
        logger.info("Task id=%s done by %s", task_id, report.by)

    def reports_of(self, task_id: str) -> list[Report]:
        return self.storage.reports_for(task_id)

    def all_tasks(self) -> list[Task]:
        return self.lister.all()

    def all_tasks_of_author(self, author: str) -> list[Task]:
        return self.lister.of_author(author)

    def all_tasks_done_by(self, doer: str) -> list[Task]:
        return self.lister.done_by(doer)
