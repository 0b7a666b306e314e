# SPDX-License-Identifier: MIT

import uuid

# Tasks are keyed by uuid4 strings, which double as their file names.
type EntityId = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def is_entity_id(value: str) -> bool:
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False
