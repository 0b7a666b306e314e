# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from tasktracker.model.entity_id import EntityId

EntityType = Literal["tasks"]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    Tasks are stored under uuids, which are unpleasant to type, so every
    listing hands out small integers that point back to them.

    real_task_id = id_map["tasks"]["synthetic_to_real"][7]
    """

    tasks: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
