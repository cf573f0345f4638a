# tests/test_cli.py

from __future__ import annotations

from datetime import datetime, timezone

from click.testing import CliRunner

from graph_tasks.cli.main import DEMO_AUTHOR, DEMO_COMMENT, DEMO_DOER, _aware, cli
from graph_tasks.core.state import AppState

from .fakes import FakeGraph


def _invoke(state: AppState, *args: str):
    return CliRunner().invoke(cli, list(args), obj=state)


def test_add_then_get(state: AppState) -> None:
    res = _invoke(state, "add", "--author", "Beniamin", "--comment", "Very hard task",
                  "--deadline", "2026-11-01 10:00:00")
    assert res.exit_code == 0, res.output
    task_id = res.output.strip()

    res = _invoke(state, "get", task_id)
    assert res.exit_code == 0, res.output
    assert res.output.startswith(f"{task_id} : Beniamin : Very hard task : deadline=")


def test_all_lists_with_index(state: AppState) -> None:
    assert _invoke(state, "all").output == ""

    ids = [_invoke(state, "add", "--author", "a", "--comment", f"c{i}").output.strip() for i in range(2)]
    res = _invoke(state, "all")

    assert res.exit_code == 0
    lines = res.output.splitlines()
    assert [line.split(" : ")[0] for line in lines] == ["0", "1"]
    assert {line.split(" : ")[1] for line in lines} == set(ids)


def test_done_and_reports(state: AppState) -> None:
    task_id = _invoke(state, "add", "--author", "a", "--comment", "c").output.strip()

    res = _invoke(state, "done", task_id, "--by", "Mariusz", "--at", "2026-11-01T12:00:00")
    assert res.exit_code == 0, res.output

    res = _invoke(state, "reports", task_id)
    assert res.output.startswith("Mariusz at ")


def test_unknown_id_exits_with_error(state: AppState) -> None:
    res = _invoke(state, "get", "nope")
    assert res.exit_code == 1
    assert "Error: there is no task with id=nope" in res.output

    res = _invoke(state, "done", "nope", "--by", "x")
    assert res.exit_code == 1


def test_demo_creates_done_task(state: AppState, graph: FakeGraph) -> None:
    res = _invoke(state, "demo")
    assert res.exit_code == 0, res.output
    task_id = res.output.strip()

    task = state.service.task_with_id(task_id)
    assert (task.author, task.comment) == (DEMO_AUTHOR, DEMO_COMMENT)
    assert [r["by"] for r in graph.edges_of(task_id)] == [DEMO_DOER]


def test_naive_option_times_get_local_zone() -> None:
    naive = datetime(2026, 11, 1, 10, 0)
    pinned = _aware(naive)
    assert pinned.tzinfo is not None
    assert pinned == naive.astimezone()

    utc = datetime(2026, 11, 1, 10, 0, tzinfo=timezone.utc)
    assert _aware(utc) is utc


def test_cli_deadline_round_trips_to_equal_value(state: AppState, graph: FakeGraph) -> None:
    res = _invoke(state, "add", "--author", "a", "--comment", "c", "--deadline", "2026-11-01 10:00:00")
    task_id = res.output.strip()

    res = _invoke(state, "done", task_id, "--by", "Mariusz", "--at", "2026-11-01T12:00:00")
    assert res.exit_code == 0, res.output

    task = state.service.task_with_id(task_id)
    assert task.deadline == datetime(2026, 11, 1, 10, 0).astimezone()
    assert state.service.reports_of(task_id)[0].at == datetime(2026, 11, 1, 12, 0).astimezone()


def test_corrupt_stored_deadline_reports_error(state: AppState, graph: FakeGraph) -> None:
    task_id = _invoke(state, "add", "--author", "a", "--comment", "c").output.strip()
    graph.tasks[0]["deadline"] = 10**12

    res = _invoke(state, "get", task_id)
    assert res.exit_code == 1
    assert "Error: column t.deadline" in res.output
