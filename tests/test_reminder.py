# SPDX-License-Identifier: MIT

import pendulum

from tasktracker.model.reminder import NotifyWhen
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import reminder as reminder_service
from tasktracker.service.task import create_task, delete_task, set_status, update_task

DUE = pendulum.datetime(2030, 1, 10, 9, 30, 45, tz="UTC")


def test_trigger_dates() -> None:
    assert NotifyWhen.AT_DUE.trigger_date(DUE) == DUE
    assert NotifyWhen.ONE_HOUR.trigger_date(DUE) == DUE.subtract(hours=1)
    assert NotifyWhen.ONE_DAY.trigger_date(DUE).date() == pendulum.date(2030, 1, 9)


def test_new_pending_task_with_due_date_gets_every_reminder() -> None:
    id = create_task("file taxes", due=DUE)

    reminders = reminder_service.reminders_for_task(id)

    assert [r["moment"] for r in reminders] == ["one_day", "one_hour", "at_due"]
    assert {r["id"] for r in reminders} == {
        f"{id}-one_day",
        f"{id}-one_hour",
        f"{id}-at_due",
    }
    assert reminders[-1]["title"] == "Task Due Now"
    assert reminders[0]["title"] == "Task Due Soon"
    assert all(r["body"] == "file taxes" for r in reminders)


def test_past_moments_are_skipped_and_seconds_zeroed() -> None:
    id = create_task("file taxes", due=DUE)
    now = pendulum.datetime(2030, 1, 9, 12, 0, tz="UTC")

    scheduled = reminder_service.schedule_reminders(TASK_REPO.get_task(id), now=now)

    assert [r["moment"] for r in scheduled] == ["one_hour", "at_due"]
    assert scheduled[-1]["fire_at"] == pendulum.datetime(2030, 1, 10, 9, 30, tz="UTC")
    assert len(reminder_service.reminders_for_task(id)) == 2


def test_task_without_due_date_has_no_reminders() -> None:
    id = create_task("someday")

    assert reminder_service.reminders_for_task(id) == []


def test_closing_a_task_cancels_and_reopening_reschedules() -> None:
    id = create_task("file taxes", due=DUE)

    set_status(id, "done")
    assert reminder_service.reminders_for_task(id) == []

    set_status(id, "pending")
    assert len(reminder_service.reminders_for_task(id)) == 3


def test_deleting_a_task_cancels_its_reminders() -> None:
    id = create_task("file taxes", due=DUE)
    other = create_task("renew passport", due=DUE)

    delete_task(id)

    assert [r["task_id"] for r in REMINDER_REPO.get_all_reminders()] == [other] * 3


def test_due_reminders_and_acknowledge() -> None:
    id = create_task("file taxes", due=DUE)
    now = pendulum.datetime(2030, 1, 10, 9, 0, tz="UTC")

    due = reminder_service.due_reminders(now)
    assert {r["moment"] for r in due} == {"one_day", "one_hour"}

    reminder_service.acknowledge_reminders(due)
    assert [r["moment"] for r in reminder_service.reminders_for_task(id)] == ["at_due"]


def test_configured_moments_limit_what_is_scheduled() -> None:
    CONFIGURATION_REPO.update_config(reminder_moments=["at_due", "bogus"])

    id = create_task("file taxes", due=DUE)

    assert [r["moment"] for r in reminder_service.reminders_for_task(id)] == ["at_due"]


def test_reminders_survive_a_reload() -> None:
    id = create_task("file taxes", due=DUE)
    REMINDER_REPO.flush()
    REMINDER_REPO.__init__()  # type: ignore[misc]

    reminders = reminder_service.reminders_for_task(id)

    assert len(reminders) == 3
    assert reminders[-1]["fire_at"] == pendulum.datetime(2030, 1, 10, 9, 30, tz="UTC")


def test_moving_the_due_date_moves_the_reminders() -> None:
    id = create_task("file taxes", due=DUE)
    later = DUE.add(days=5)

    update_task(id, due=later)

    reminders = reminder_service.reminders_for_task(id)
    assert len(reminders) == 3
    assert reminders[-1]["fire_at"] == later.set(second=0)


def test_removing_the_due_date_clears_the_reminders() -> None:
    id = create_task("file taxes", due=DUE)

    update_task(id, remove_due=True)

    assert reminder_service.reminders_for_task(id) == []


def test_renaming_keeps_fired_reminders_and_updates_their_body() -> None:
    due = pendulum.now("UTC").add(minutes=30)
    id = create_task("file taxes", due=due)
    # back-date the schedule so the day and hour reminders have already fired
    reminder_service.schedule_reminders(
        TASK_REPO.get_task(id), now=due.subtract(days=2)
    )
    assert len(reminder_service.due_reminders()) == 2

    update_task(id, title="file taxes early")

    reminders = reminder_service.reminders_for_task(id)
    assert len(reminders) == 3
    assert len(reminder_service.due_reminders()) == 2
    assert all(r["body"] == "file taxes early" for r in reminders)
