# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from tasktracker.repository.tag import TAG_REPO
from tasktracker.repository.task import TASK_REPO

logger = logging.getLogger(__name__)


def all_tag_names() -> list[str]:
    """Every known tag, sorted case-insensitively for display."""
    return TAG_REPO.get_all_tags()


def split_tag_input(raw_input: str) -> list[str]:
    """
    Split comma-separated tag input into trimmed, non-empty names.

    Duplicates are dropped, keeping the first occurrence in input order.
    """
    pieces = [piece.strip() for piece in raw_input.split(",")]
    return list(dict.fromkeys(piece for piece in pieces if piece != ""))


def find_tag(name: str) -> Optional[str]:
    """Look up a known tag case-insensitively, returning its stored spelling."""
    if TAG_REPO.tag_exists(name):
        return name

    folded = name.casefold()
    for tag in all_tag_names():
        if tag.casefold() == folded:
            return tag
    return None


def ensure_tags(raw_input: str) -> list[str]:
    """
    Resolve comma-separated tag input to tag names, registering new ones.

    A piece matching a known tag case-insensitively resolves to the known
    spelling, so "Urgent" reuses an existing "urgent".
    """
    result: list[str] = []
    for name in split_tag_input(raw_input):
        existing = find_tag(name)
        if existing is None:
            logger.info("registering new tag %r", name)
            TAG_REPO.add_tag(name)
            existing = name
        if existing not in result:
            result.append(existing)
    return result


def append_tag(raw_input: str, tag: str) -> str:
    """Add a picked suggestion to comma-separated tag input."""
    names = set(split_tag_input(raw_input))
    names.add(tag)
    return ", ".join(sorted(names))


def suggest_tags(prefix: str) -> list[str]:
    folded = prefix.strip().casefold()
    return [tag for tag in all_tag_names() if tag.casefold().startswith(folded)]


def tag_usage() -> dict[str, int]:
    """Count how many tasks carry each known tag."""
    usage = {tag: 0 for tag in all_tag_names()}
    for task in TASK_REPO.get_all_tasks():
        for tag in task["tags"]:
            usage[tag] = usage.get(tag, 0) + 1
    return usage


def sync_tags() -> None:
    """
    Synchronize the tags.yaml file with the tags found on tasks.

    Tags no task carries any more are dropped.
    """
    all_tags: set[str] = set()
    for task in TASK_REPO.get_all_tasks():
        all_tags.update(task["tags"])

    TAG_REPO.set_all_tags(sorted(all_tags))
