# SPDX-License-Identifier: MIT

import typer

from tasktracker import state
from tasktracker.model.entity_id import EntityId
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.terminal.parse import parse_id_list


def clear_id_map_if_required() -> None:
    """Start numbering afresh before a listing hands out new synthetic ids."""
    if state.get_clear_ids():
        ID_MAP_REPO.clear_ids()


def resolve_task_id(synthetic_id: int) -> EntityId:
    try:
        real_id = ID_MAP_REPO.get_real_id("tasks", synthetic_id)
    except KeyError:
        raise typer.BadParameter(
            f"Unknown task id {synthetic_id}, list tasks to refresh ids"
        )
    if not TASK_REPO.task_exists(real_id):
        raise typer.BadParameter(f"Task {synthetic_id} no longer exists")
    return real_id


def resolve_task_ids(id_param: str) -> list[EntityId]:
    return [resolve_task_id(synthetic_id) for synthetic_id in parse_id_list(id_param)]
