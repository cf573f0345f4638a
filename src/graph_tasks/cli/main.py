# src/graph_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs one task command against the
graph backend. Tests pass a prepared AppState through click's ``obj``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import click

from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError
from ..tasks.task_models import Report, Task

logger = logging.getLogger(__name__)

DEMO_AUTHOR = "Beniamin"
DEMO_COMMENT = "Very hard task"
DEMO_DOER = "Mariusz"


def _format_task(task: Task) -> str:
    return f"{task.id} : {task.author} : {task.comment} : deadline={task.deadline.isoformat()}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _aware(value: datetime) -> datetime:
    # click.DateTime parses naive values; pin them to the local zone.
    return value if value.tzinfo is not None else value.astimezone()


def _state(ctx: click.Context) -> AppState:
    return ctx.find_object(AppState)


def _run(fn):
    """Turn domain errors into a click error (message + exit status 1)."""
    try:
        return fn()
    except TaskError as exc:
        logger.debug("Command failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Tasks and completion reports stored in a property graph."""
    if ctx.obj is not None:
        return

    settings = get_settings()
    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logging.getLogger("redis").setLevel(logging.WARNING)

    from .bootstrap import create_initial_state, shutdown

    try:
        state = create_initial_state(settings=settings)
    except Exception as exc:
        logger.exception("Failed to connect to the graph backend.")
        raise click.ClickException(f"cannot connect to graph backend: {exc}") from exc
    ctx.obj = state
    ctx.call_on_close(lambda: shutdown(state))


@cli.command()
@click.option("--author", required=True)
@click.option("--comment", required=True)
@click.option("--deadline", type=click.DateTime(), default=None,
              help="Deadline, in local time.")
@click.option("--in-hours", type=float, default=24.0, show_default=True,
              help="Deadline relative to now when --deadline is absent.")
@click.pass_context
def add(ctx: click.Context, author: str, comment: str, deadline: datetime | None, in_hours: float) -> None:
    """Create a task and print its id."""
    deadline = _aware(deadline) if deadline is not None else _now() + timedelta(hours=in_hours)
    service = _state(ctx).service
    task_id = _run(lambda: service.new_task(author, comment, deadline))
    click.echo(task_id)


@cli.command()
@click.argument("task_id")
@click.pass_context
def get(ctx: click.Context, task_id: str) -> None:
    """Print the task with the given id."""
    service = _state(ctx).service
    task = _run(lambda: service.task_with_id(task_id))
    click.echo(_format_task(task))


@cli.command(name="all")
@click.pass_context
def all_(ctx: click.Context) -> None:
    """Print every task."""
    service = _state(ctx).service
    for i, task in enumerate(_run(service.all_tasks)):
        click.echo(f"{i} : {_format_task(task)}")


@cli.command()
@click.argument("task_id")
@click.option("--by", "doer", required=True)
@click.option("--at", type=click.DateTime(), default=None, help="Completion time, in local time (default: now).")
@click.pass_context
def done(ctx: click.Context, task_id: str, doer: str, at: datetime | None) -> None:
    """Mark a task done."""
    service = _state(ctx).service
    report = Report(by=doer, at=_aware(at) if at is not None else _now())
    _run(lambda: service.done_task(task_id, report))
    click.echo(f"{task_id} done by {doer}")


@cli.command()
@click.argument("task_id")
@click.pass_context
def reports(ctx: click.Context, task_id: str) -> None:
    """Print completion reports of a task."""
    service = _state(ctx).service
    for r in _run(lambda: service.reports_of(task_id)):
        click.echo(f"{r.by} at {r.at.isoformat()}")


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Create a sample task and mark it done."""
    service = _state(ctx).service
    now = _now()
    task_id = _run(lambda: service.new_task(DEMO_AUTHOR, DEMO_COMMENT, now + timedelta(hours=24)))
    _run(lambda: service.done_task(task_id, Report(by=DEMO_DOER, at=now + timedelta(seconds=2))))
    click.echo(task_id)


def main() -> None:
    cli(prog_name="graph-tasks")


if __name__ == "__main__":
    main()
