# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from tasktracker.model.entity_id import EntityId
from tasktracker.model.reminder import NotifyWhen, Reminder
from tasktracker.model.task import Task
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.time import now_utc

logger = logging.getLogger(__name__)

DEFAULT_MOMENTS = [NotifyWhen.ONE_DAY, NotifyWhen.ONE_HOUR, NotifyWhen.AT_DUE]


def reminder_id(task_id: EntityId, moment: NotifyWhen) -> str:
    return f"{task_id}-{moment.value}"


def configured_moments() -> list[NotifyWhen]:
    moments: list[NotifyWhen] = []
    for raw_moment in CONFIGURATION_REPO.get_config()["reminder_moments"]:
        try:
            moments.append(NotifyWhen(raw_moment))
        except ValueError:
            logger.warning("ignoring unknown reminder moment %r", raw_moment)
    return moments


def cancel_reminders(task_id: EntityId) -> int:
    ids = [reminder_id(task_id, moment) for moment in NotifyWhen]
    removed = REMINDER_REPO.remove_reminders(ids)
    if removed > 0:
        logger.info("cancelled %d reminders for task %s", removed, task_id)
    return removed


def schedule_reminders(
    task: Task,
    when: Optional[list[NotifyWhen]] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[Reminder]:
    """
    Replace the task's reminders with one per moment still in the future.

    Tasks that are not pending, or have no due date, end up with none.
    """
    if task["id"] is None:
        raise ValueError("cannot schedule reminders for an unsaved task")
    if when is None:
        when = DEFAULT_MOMENTS
    if now is None:
        now = now_utc()

    cancel_reminders(task["id"])

    due = task["due"]
    if task["status"] != "pending" or due is None:
        return []

    scheduled: list[Reminder] = []
    for moment in when:
        fire_at = moment.trigger_date(due).set(second=0, microsecond=0)
        if fire_at <= now:
            continue

        reminder: Reminder = {
            "id": reminder_id(task["id"], moment),
            "task_id": task["id"],
            "moment": moment.value,
            "title": f"Task Due {'Now' if moment == NotifyWhen.AT_DUE else 'Soon'}",
            "body": task["title"],
            "fire_at": fire_at.in_tz("UTC"),
        }
        REMINDER_REPO.add_reminder(reminder)
        scheduled.append(reminder)

    logger.info("scheduled %d reminders for task %s", len(scheduled), task["id"])
    return scheduled


def sync_task_reminders(task: Task) -> list[Reminder]:
    """Schedule for pending tasks with a due date, cancel for everything else."""
    if task["status"] == "pending" and task["due"] is not None:
        return schedule_reminders(task, configured_moments())
    if task["id"] is not None:
        cancel_reminders(task["id"])
    return []


def retitle_reminders(task: Task) -> int:
    """Carry a title change into reminders without rescheduling them."""
    if task["id"] is None:
        return 0
    return REMINDER_REPO.set_body_for_task(task["id"], task["title"])


def reminders_for_task(task_id: EntityId) -> list[Reminder]:
    return [
        reminder
        for reminder in REMINDER_REPO.get_all_reminders()
        if reminder["task_id"] == task_id
    ]


def due_reminders(now: Optional[pendulum.DateTime] = None) -> list[Reminder]:
    if now is None:
        now = now_utc()
    return [
        reminder
        for reminder in REMINDER_REPO.get_all_reminders()
        if reminder["fire_at"] <= now
    ]


def acknowledge_reminders(reminders: list[Reminder]) -> None:
    REMINDER_REPO.remove_reminders([reminder["id"] for reminder in reminders])


def resync_reminders(tasks: list[Task]) -> int:
    """Rebuild the whole schedule, e.g. after the configured moments change."""
    scheduled = 0
    for task in tasks:
        scheduled += len(sync_task_reminders(task))
    return scheduled
