# src/graph_tasks/tasks/task_models.py

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    author: str
    comment: str
    deadline: datetime


@dataclass(frozen=True, slots=True)
class Report:
    """Who completed a task and when."""

    by: str
    at: datetime


def build_task(author: str, comment: str, deadline: datetime) -> Task:
    """
    Build a new Task with a freshly generated UUID4 identifier.

    Does not touch storage; the caller persists the result.
    """
    return Task(id=str(uuid.uuid4()), author=author, comment=comment, deadline=deadline)


def to_epoch_seconds(value: datetime) -> int:
    # Naive datetimes are local time, as datetime.timestamp() treats them.
    return math.floor(value.timestamp())


def from_epoch_seconds(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
