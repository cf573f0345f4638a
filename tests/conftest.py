# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from graph_tasks.core.service import TaskService
from graph_tasks.core.state import AppState
from graph_tasks.storage.graph_store import GraphTaskStore

from .fakes import FakeGraph


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="graph-tasks-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        graph_host="127.0.0.1",
        graph_port=6379,
        graph_password="",
        graph_name="tasks_test",
        query_timeout_ms=1000,
        socket_timeout=1.0,
    )


@pytest.fixture()
def graph() -> FakeGraph:
    return FakeGraph()


@pytest.fixture()
def store(graph: FakeGraph, settings: SimpleNamespace) -> GraphTaskStore:
    return GraphTaskStore(graph, query_timeout_ms=settings.query_timeout_ms)


@pytest.fixture()
def service(store: GraphTaskStore) -> TaskService:
    return TaskService(storage=store, lister=store)


@pytest.fixture()
def state(settings: SimpleNamespace, service: TaskService) -> AppState:
    """AppState wired with the in-memory graph (no backend client)."""
    return AppState(settings=settings, service=service)
