# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tasktracker.repository.task import TASK_REPO
from tasktracker.service import note as note_service
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.terminal.lookup import resolve_task_id
from tasktracker.terminal.parse import open_editor_for_text
from tasktracker.view.views.note import notes_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    task_id: int,
    text: Annotated[
        Optional[str],
        typer.Argument(help="note text; opens $EDITOR when omitted"),
    ] = None,
) -> None:
    """Append a work note to a task."""
    real_id = resolve_task_id(task_id)

    if text is None:
        text = open_editor_for_text()
    if text is None or text.strip() == "":
        raise typer.BadParameter("Note text cannot be empty")

    note_service.add_note(real_id, text)
    notes_view(TASK_REPO.get_task(real_id))


@app.command("edit, e", no_args_is_help=True)
def edit(
    task_id: int,
    position: int,
    text: Annotated[
        Optional[str],
        typer.Argument(help="new text; opens $EDITOR with the old text when omitted"),
    ] = None,
) -> None:
    """Replace the text of a work note."""
    real_id = resolve_task_id(task_id)

    if text is None:
        task = TASK_REPO.get_task(real_id)
        current = [n for n in task["work_notes"] if n["position"] == position]
        text = open_editor_for_text(current[0]["text"] if current else None)
    if text is None:
        raise typer.BadParameter("Note text cannot be empty")

    try:
        note_service.edit_note(real_id, position, text)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    notes_view(TASK_REPO.get_task(real_id))


@app.command("remove, rm", no_args_is_help=True)
def remove(task_id: int, position: int) -> None:
    """Remove a work note; later notes move up one position."""
    real_id = resolve_task_id(task_id)
    try:
        note_service.remove_note(real_id, position)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    notes_view(TASK_REPO.get_task(real_id))


@app.command("move, mv", no_args_is_help=True)
def move(task_id: int, position: int, new_position: int) -> None:
    """Move a work note to another position."""
    real_id = resolve_task_id(task_id)
    try:
        note_service.move_note(real_id, position, new_position)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    notes_view(TASK_REPO.get_task(real_id))


@app.command("list, ls", no_args_is_help=True)
def list_notes(task_id: int) -> None:
    notes_view(TASK_REPO.get_task(resolve_task_id(task_id)))
