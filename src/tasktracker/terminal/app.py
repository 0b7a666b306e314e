# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tasktracker import state
from tasktracker.terminal import (
    attachment,
    configuration,
    note,
    reminder,
    tag,
    task,
)
from tasktracker.terminal.custom_typer import OrderedTyperGroup

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="tasktracker - personal tasks with due-date colors and reminders",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(note.app, name="note, n")
app.add_typer(attachment.app, name="attachment, at")
app.add_typer(tag.app, name="tag, tg")
app.add_typer(reminder.app, name="reminder, r")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    keep_ids: Annotated[
        bool,
        typer.Option(
            "--keep-ids",
            help="Keep the ids handed out by the previous listing",
        ),
    ] = False,
) -> None:
    """
    tasktracker - personal tasks with due-date colors and reminders

    Global options that apply to all commands.
    """
    if no_header:
        state.set_show_header(False)
    if keep_ids:
        state.set_clear_ids(False)


def run() -> None:
    app()
