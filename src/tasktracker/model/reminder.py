# SPDX-License-Identifier: MIT

from enum import Enum
from typing import TypedDict

import pendulum

from tasktracker.model.entity_id import EntityId


class NotifyWhen(Enum):
    AT_DUE = "at_due"
    ONE_HOUR = "one_hour"
    ONE_DAY = "one_day"

    def trigger_date(self, due: pendulum.DateTime) -> pendulum.DateTime:
        match self:
            case NotifyWhen.AT_DUE:
                return due
            case NotifyWhen.ONE_HOUR:
                return due.subtract(hours=1)
            case NotifyWhen.ONE_DAY:
                # one calendar day earlier on the local clock
                return due.in_tz("local").subtract(days=1).in_tz("UTC")


class Reminder(TypedDict):
    id: str
    task_id: EntityId
    moment: str
    title: str
    body: str
    fire_at: pendulum.DateTime


class Reminders(TypedDict):
    reminders: list[Reminder]
