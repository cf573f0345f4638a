# src/graph_tasks/storage/connection.py

"""
FalkorDB connection helpers.

The FalkorDB client keeps a redis-py connection pool, so one handle can be
shared by every caller in the process. The composition root owns it and
passes the selected graph into GraphTaskStore.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from falkordb import FalkorDB
from redis.exceptions import ResponseError

from .graph_store import TASK_ID_PROPERTY, TASK_LABEL

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from falkordb import Graph


def connect(settings) -> FalkorDB:
    db = FalkorDB(
        host=settings.graph_host,
        port=settings.graph_port,
        password=settings.graph_password or None,
        socket_timeout=settings.socket_timeout or None,
    )
    logger.info("Connected to FalkorDB at %s:%s", settings.graph_host, settings.graph_port)
    return db


def select_task_graph(db: FalkorDB, settings) -> Graph:
    graph = db.select_graph(settings.graph_name)
    ensure_task_index(graph)
    return graph


def ensure_task_index(graph: Graph) -> None:
    """Create the Task.taskID range index if it does not exist yet."""
    try:
        graph.create_node_range_index(TASK_LABEL, TASK_ID_PROPERTY)
        logger.info("Created index on :%s(%s)", TASK_LABEL, TASK_ID_PROPERTY)
    except ResponseError as exc:
        if "already indexed" not in str(exc):
            raise
        logger.debug("Index on :%s(%s) already present", TASK_LABEL, TASK_ID_PROPERTY)
