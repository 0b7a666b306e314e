# SPDX-License-Identifier: MIT

from tasktracker.model.attachment import Attachment
from tasktracker.model.note import WorkNote


def reindex[T: (WorkNote, Attachment)](items: list[T]) -> list[T]:
    """Order items by position and renumber them contiguously from zero."""
    ordered = sorted(items, key=lambda item: item["position"])
    for position, item in enumerate(ordered):
        item["position"] = position
    return ordered


def check_position[T: (WorkNote, Attachment)](items: list[T], position: int) -> None:
    if not 0 <= position < len(items):
        raise ValueError(
            f"position {position} is out of range, expected 0 to {len(items) - 1}"
        )


def append[T: (WorkNote, Attachment)](items: list[T], item: T) -> list[T]:
    ordered = reindex(items)
    item["position"] = len(ordered)
    ordered.append(item)
    return ordered


def remove[T: (WorkNote, Attachment)](
    items: list[T], position: int
) -> tuple[list[T], T]:
    ordered = reindex(items)
    check_position(ordered, position)
    removed = ordered.pop(position)
    return reindex(ordered), removed


def move[T: (WorkNote, Attachment)](
    items: list[T], position: int, new_position: int
) -> list[T]:
    ordered = reindex(items)
    check_position(ordered, position)
    check_position(ordered, new_position)
    item = ordered.pop(position)
    ordered.insert(new_position, item)
    for index, entry in enumerate(ordered):
        entry["position"] = index
    return ordered
