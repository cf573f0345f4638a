# src/graph_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .service import TaskService


@dataclass
class AppState:
    # Store Settings on the state for easy access in commands.
    settings: Any
    service: TaskService
    # Backend client owning the connection pool (None when wired with fakes).
    db: Any = None
