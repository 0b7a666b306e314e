# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from tasktracker.color import DueColorScheme
from tasktracker.model.entity_id import EntityId
from tasktracker.model.task import TaskStatus
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import task as task_service
from tasktracker.service.reminder import reminders_for_task
from tasktracker.terminal.completion import complete_tag
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.terminal.lookup import (
    clear_id_map_if_required,
    resolve_task_id,
    resolve_task_ids,
)
from tasktracker.terminal.parse import DATETIME_HELP, parse_datetime
from tasktracker.terminal.validate import (
    validate_optional_title,
    validate_status,
    validate_status_filter,
    validate_title,
)
from tasktracker.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __color_scheme() -> DueColorScheme:
    return DueColorScheme.from_config(CONFIGURATION_REPO.get_config())


def __show_tasks(report_name: str, ids: list[EntityId]) -> None:
    tasks = [TASK_REPO.get_task(id) for id in ids]
    task_report.tasks_view(report_name, tasks, __color_scheme())


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    tags: Annotated[
        Optional[str],
        typer.Option(
            "--tags",
            "-t",
            help="comma-separated, e.g. 'urgent, client-x'",
            autocompletion=complete_tag,
        ),
    ] = None,
    note: Annotated[
        Optional[str], typer.Option("--note", "-n", help="first work note")
    ] = None,
    status: Annotated[
        str, typer.Option("--status", "-s", callback=validate_status)
    ] = "pending",
) -> None:
    """Create a task."""
    id = task_service.create_task(
        title,
        due=due,
        status=cast(TaskStatus, status),
        tags_input=tags,
        note=note,
    )

    task_report.single_task_view(
        TASK_REPO.get_task(id), __color_scheme(), reminders_for_task(id)
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-ti", callback=validate_optional_title),
    ] = None,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
    tags: Annotated[
        Optional[str],
        typer.Option(
            "--tags",
            "-t",
            help="replace all tags, comma-separated",
            autocompletion=complete_tag,
        ),
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--add-tag",
            "-at",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    remove_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--remove-tag",
            "-rt",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    status: Annotated[
        Optional[str], typer.Option("--status", "-s", callback=validate_status)
    ] = None,
) -> None:
    """Change any subset of a task's fields; accepts id lists like 1,3-5."""
    if due is not None and remove_due:
        raise typer.BadParameter("--due and --remove-due cannot be combined")

    real_ids = resolve_task_ids(id)
    for real_id in real_ids:
        task_service.update_task(
            real_id,
            title=title,
            due=due,
            remove_due=remove_due,
            status=cast(Optional[TaskStatus], status),
            tags_input=tags,
            add_tags=add_tags,
            remove_tags=remove_tags,
        )

    __show_tasks("modified tasks", real_ids)


def __set_status(id: str, status: TaskStatus, report_name: str) -> None:
    real_ids = resolve_task_ids(id)
    for real_id in real_ids:
        task_service.set_status(real_id, status)
    __show_tasks(report_name, real_ids)


@app.command("done, d", no_args_is_help=True)
def done(id: str) -> None:
    """Mark tasks done and cancel their reminders."""
    __set_status(id, "done", "done tasks")


@app.command("cancel, c", no_args_is_help=True)
def cancel(id: str) -> None:
    """Mark tasks canceled and cancel their reminders."""
    __set_status(id, "canceled", "canceled tasks")


@app.command("reopen, r", no_args_is_help=True)
def reopen(id: str) -> None:
    """Set tasks back to pending, rescheduling reminders when they are due."""
    __set_status(id, "pending", "reopened tasks")


@app.command("delete, del", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete tasks together with their reminders and copied attachments."""
    real_ids = resolve_task_ids(id)
    deleted_tasks = [TASK_REPO.get_task(real_id) for real_id in real_ids]
    for real_id in real_ids:
        task_service.delete_task(real_id)

    task_report.tasks_view(
        "deleted tasks", deleted_tasks, __color_scheme(), ["title", "due", "tags"]
    )


@app.command("list, ls")
def list_tasks(
    status: Annotated[
        str,
        typer.Option(
            "--status",
            "-s",
            callback=validate_status_filter,
            help="pending, done, canceled, or all",
        ),
    ] = "pending",
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="show tasks carrying any of these tags",
            autocompletion=complete_tag,
        ),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-q", help="match title or work notes"),
    ] = None,
) -> None:
    """List tasks ordered by time left until due."""
    clear_id_map_if_required()

    tasks = task_service.filter_tasks(
        TASK_REPO.get_all_tasks(),
        status=cast(task_service.StatusFilter, status),
        tags=tags,
        search=search,
    )
    task_report.tasks_view(f"{status} tasks", tasks, __color_scheme())


@app.command("show, s", no_args_is_help=True)
def show(id: int) -> None:
    """Show one task with its notes, attachments and reminders."""
    real_id = resolve_task_id(id)
    task_report.single_task_view(
        TASK_REPO.get_task(real_id), __color_scheme(), reminders_for_task(real_id)
    )
