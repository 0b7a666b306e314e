# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration, time
from tasktracker.model.attachment import Attachment
from tasktracker.model.entity_id import EntityId, generate_entity_id, is_entity_id
from tasktracker.model.note import WorkNote
from tasktracker.model.task import Task, TaskStatus, status_from_str
from tasktracker.repository.tag import TAG_REPO

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            if not is_entity_id(file_path.stem):
                logger.warning("skipping %s, name is not a task id", file_path.name)
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug("loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_DIR)

    def __save_data(self) -> None:
        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TASKS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "wrote %d task files, removed %d",
            len(self._dirty_ids - self._deleted_ids),
            len(self._deleted_ids),
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created"] = time.datetime_to_iso_str(task["created"])
        serializable_task["updated"] = time.datetime_to_iso_str(task["updated"])
        serializable_task["due"] = time.datetime_to_iso_str_optional(task["due"])
        for work_note in serializable_task["work_notes"]:
            work_note["created"] = time.datetime_to_iso_str(work_note["created"])
        for attachment in serializable_task["attachments"]:
            attachment["created"] = time.datetime_to_iso_str(attachment["created"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["created"] = time.datetime_from_str(task["created"])
        deserializable_task["updated"] = time.datetime_from_str(task["updated"])
        deserializable_task["due"] = time.datetime_from_str_optional(task.get("due"))
        deserializable_task["status"] = status_from_str(task.get("status"))
        deserializable_task["tags"] = task.get("tags") or []

        work_notes = task.get("work_notes") or []
        for work_note in work_notes:
            work_note["created"] = time.datetime_from_str(work_note["created"])
        deserializable_task["work_notes"] = sorted(
            work_notes, key=lambda work_note: work_note["position"]
        )

        attachments = task.get("attachments") or []
        for attachment in attachments:
            attachment["created"] = time.datetime_from_str(attachment["created"])
        deserializable_task["attachments"] = sorted(
            attachments, key=lambda attachment: attachment["position"]
        )
        return cast(Task, deserializable_task)

    def __find_task(self, id: EntityId, method_name: str) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        raise ValueError(
            f"{TaskRepository.__name__}.{method_name}: error, no task with id {id}"
        )

    def save_new_task(self, task: Task) -> EntityId:
        title = task["title"].strip()
        if title == "":
            raise ValueError(
                f"{TaskRepository.__name__}.{TaskRepository.save_new_task.__name__}: error, task title cannot be empty"
            )

        self.is_dirty = True

        task["id"] = generate_entity_id()
        task["title"] = title

        # Deduplicate tags
        task["tags"] = list(dict.fromkeys(task["tags"]))

        self.tasks.append(task)
        self._dirty_ids.add(task["id"])

        TAG_REPO.add_tags(task["tags"])

        logger.info("created task %s", task["id"])
        return task["id"]

    def modify_task(
        self,
        id: EntityId,
        title: Optional[str] = None,
        due: Optional[pendulum.DateTime] = None,
        status: Optional[TaskStatus] = None,
        tags: Optional[list[str]] = None,
        work_notes: Optional[list[WorkNote]] = None,
        attachments: Optional[list[Attachment]] = None,
        remove_due: bool = False,
    ) -> None:
        task = self.__find_task(id, TaskRepository.modify_task.__name__)

        if title is not None and title.strip() == "":
            raise ValueError(
                f"{TaskRepository.__name__}.{TaskRepository.modify_task.__name__}: error, task title cannot be empty"
            )

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        task["updated"] = time.now_utc()
        if title is not None:
            task["title"] = title.strip()
        if due is not None:
            task["due"] = due
        if status is not None:
            task["status"] = status
        if tags is not None:
            # Deduplicate tags
            deduplicated_tags = list(dict.fromkeys(tags))
            task["tags"] = deduplicated_tags
            TAG_REPO.add_tags(deduplicated_tags)
        if work_notes is not None:
            task["work_notes"] = deepcopy(work_notes)
        if attachments is not None:
            task["attachments"] = deepcopy(attachments)

        if remove_due:
            task["due"] = None

    def delete_task(self, id: EntityId) -> None:
        task = self.__find_task(id, TaskRepository.delete_task.__name__)

        self.is_dirty = True
        self.tasks.remove(task)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        logger.info("deleted task %s", id)

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Task:
        return deepcopy(self.__find_task(id, TaskRepository.get_task.__name__))

    def task_exists(self, id: EntityId) -> bool:
        return any(task["id"] == id for task in self.tasks)


TASK_REPO = TaskRepository()
