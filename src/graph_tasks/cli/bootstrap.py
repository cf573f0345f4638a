# src/graph_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- opens the FalkorDB client (one pooled handle for the process),
- wires GraphTaskStore into TaskService as both storage and lister.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.service import TaskService
from ..core.state import AppState
from ..storage.connection import connect, select_task_graph
from ..storage.graph_store import GraphTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    db = connect(settings)
    graph = select_task_graph(db, settings)
    store = GraphTaskStore(graph, query_timeout_ms=settings.query_timeout_ms)

    return AppState(
        settings=settings,
        service=TaskService(storage=store, lister=store),
        db=db,
    )


def shutdown(state: AppState) -> None:
    """Release the backend connection pool."""
    conn = getattr(state.db, "connection", None)
    if conn is None:
        return
    try:
        conn.close()
    except Exception:
        logger.debug("Connection close failed.", exc_info=True)
