# SPDX-License-Identifier: MIT

from typing import cast, get_args

from tasktracker.model.id_map import EntityType, IdMap


def get_id_map_template() -> IdMap:
    """An empty synthetic id table for every entity type that gets listed."""
    return cast(
        IdMap,
        {
            entity_type: {"synthetic_to_real": {}, "real_to_synthetic": {}}
            for entity_type in get_args(EntityType)
        },
    )
