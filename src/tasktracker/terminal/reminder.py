# SPDX-License-Identifier: MIT

import typer

from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import reminder as reminder_service
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.view.views.reminder import reminders_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_reminders() -> None:
    """Show every scheduled reminder."""
    reminders_view("scheduled reminders", REMINDER_REPO.get_all_reminders())


@app.command("due, d")
def due() -> None:
    """Show reminders whose time has come, then clear them."""
    due_reminders = reminder_service.due_reminders()
    reminders_view("due reminders", due_reminders)
    reminder_service.acknowledge_reminders(due_reminders)


@app.command("sync")
def sync() -> None:
    """Rebuild every task's reminders from the configured moments."""
    reminder_service.resync_reminders(TASK_REPO.get_all_tasks())
    reminders_view("scheduled reminders", REMINDER_REPO.get_all_reminders())
