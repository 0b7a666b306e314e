# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated

import typer
from rich import print

from tasktracker.repository.task import TASK_REPO
from tasktracker.service import attachment as attachment_service
from tasktracker.service import position as position_service
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.terminal.lookup import resolve_task_id
from tasktracker.view.views.attachment import attachments_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

ExistingFile = Annotated[
    Path,
    typer.Argument(exists=True, file_okay=True, dir_okay=False, readable=True),
]


@app.command("link, l", no_args_is_help=True)
def link(task_id: int, path: ExistingFile) -> None:
    """Attach a file where it is, without copying it."""
    real_id = resolve_task_id(task_id)
    attachment_service.link_attachment(real_id, path)
    attachments_view(TASK_REPO.get_task(real_id))


@app.command("copy, cp", no_args_is_help=True)
def copy(task_id: int, path: ExistingFile) -> None:
    """Copy a file into the data directory and attach the copy."""
    real_id = resolve_task_id(task_id)
    attachment_service.copy_attachment(real_id, path)
    attachments_view(TASK_REPO.get_task(real_id))


@app.command("remove, rm", no_args_is_help=True)
def remove(task_id: int, position: int) -> None:
    """Detach a file; a local copy is deleted, a linked file is left alone."""
    real_id = resolve_task_id(task_id)
    try:
        attachment_service.remove_attachment(real_id, position)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    attachments_view(TASK_REPO.get_task(real_id))


@app.command("move, mv", no_args_is_help=True)
def move(task_id: int, position: int, new_position: int) -> None:
    real_id = resolve_task_id(task_id)
    try:
        attachment_service.move_attachment(real_id, position, new_position)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    attachments_view(TASK_REPO.get_task(real_id))


@app.command("list, ls", no_args_is_help=True)
def list_attachments(task_id: int) -> None:
    attachments_view(TASK_REPO.get_task(resolve_task_id(task_id)))


@app.command("path, p", no_args_is_help=True)
def path(task_id: int, position: int) -> None:
    """Print the absolute path of an attached file."""
    task = TASK_REPO.get_task(resolve_task_id(task_id))
    attachments = position_service.reindex(task["attachments"])
    try:
        position_service.check_position(attachments, position)
        resolved = attachment_service.resolve_attachment_path(attachments[position])
    except ValueError as e:
        raise typer.BadParameter(str(e))
    except FileNotFoundError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    typer.echo(str(resolved))
