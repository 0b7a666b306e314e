# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration, time
from tasktracker.model.reminder import Reminder


class ReminderRepository:
    def __init__(self) -> None:
        self._reminders: Optional[list[Reminder]] = None
        self.is_dirty = False

    @property
    def reminders(self) -> list[Reminder]:
        if self._reminders is None:
            self.__load_data()
        if self._reminders is None:
            raise ValueError()
        return self._reminders

    def __load_data(self) -> None:
        reminders_data = load(
            configuration.DATA_REMINDERS_PATH.read_text(), Loader=Loader
        )
        raw_reminders = (reminders_data or {}).get("reminders") or []
        self._reminders = [
            self.__convert_reminder_for_deserialization(raw_reminder)
            for raw_reminder in raw_reminders
        ]

    def __save_data(self, reminders: list[Reminder]) -> None:
        reminders_data = {
            "reminders": [
                self.__convert_reminder_for_serialization(deepcopy(reminder))
                for reminder in sorted(reminders, key=lambda r: r["fire_at"])
            ]
        }
        configuration.DATA_REMINDERS_PATH.write_text(
            dump(reminders_data, Dumper=Dumper)
        )

    def flush(self) -> bool:
        if self._reminders is not None and self.is_dirty:
            self.__save_data(self._reminders)
            self.is_dirty = False
            return True
        return False

    def __convert_reminder_for_serialization(
        self, reminder: Reminder
    ) -> dict[str, Any]:
        serializable_reminder = cast(dict[str, Any], reminder)
        serializable_reminder["fire_at"] = time.datetime_to_iso_str(
            reminder["fire_at"]
        )
        return serializable_reminder

    def __convert_reminder_for_deserialization(
        self, reminder: dict[str, Any]
    ) -> Reminder:
        reminder["fire_at"] = time.datetime_from_str(reminder["fire_at"])
        return cast(Reminder, reminder)

    def add_reminder(self, reminder: Reminder) -> None:
        """Add a reminder, replacing any pending one with the same id."""
        self.remove_reminders([reminder["id"]])
        self.is_dirty = True
        self.reminders.append(reminder)

    def remove_reminders(self, ids: list[str]) -> int:
        remaining = [
            reminder for reminder in self.reminders if reminder["id"] not in ids
        ]
        removed = len(self.reminders) - len(remaining)
        if removed > 0:
            self.is_dirty = True
            self._reminders = remaining
        return removed

    def set_body_for_task(self, task_id: str, body: str) -> int:
        """Rewrite the body of every reminder belonging to a task, fired or not."""
        changed = 0
        for reminder in self.reminders:
            if reminder["task_id"] == task_id and reminder["body"] != body:
                reminder["body"] = body
                changed += 1
        if changed > 0:
            self.is_dirty = True
        return changed

    def get_all_reminders(self) -> list[Reminder]:
        return deepcopy(sorted(self.reminders, key=lambda r: r["fire_at"]))


REMINDER_REPO = ReminderRepository()
