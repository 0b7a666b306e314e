# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration
from tasktracker.model.tag import Tags


def display_sort_key(tag: str) -> tuple[str, str]:
    """Case-insensitive order, ties broken by the exact spelling."""
    return (tag.casefold(), tag)


class TagRepository:
    def __init__(self) -> None:
        self._tags: Optional[set[str]] = None
        self.is_dirty = False

    @property
    def tags(self) -> set[str]:
        if self._tags is None:
            self.__load_data()
        if self._tags is None:
            raise ValueError()
        return self._tags

    def __load_data(self) -> None:
        tags_data: Optional[Tags] = load(
            configuration.DATA_TAGS_PATH.read_text(), Loader=Loader
        )
        if tags_data is None:
            self._tags = set()
            return
        self._tags = set(tags_data["tags"] or [])

    def __save_data(self, tags: set[str]) -> None:
        tags_data: Tags = {"tags": sorted(tags, key=display_sort_key)}
        configuration.DATA_TAGS_PATH.write_text(dump(tags_data, Dumper=Dumper))

    def flush(self) -> bool:
        if self._tags is not None and self.is_dirty:
            self.__save_data(self._tags)
            self.is_dirty = False
            return True
        return False

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.is_dirty = True
            self.tags.add(tag)

    def add_tags(self, tags: list[str]) -> None:
        for tag in tags:
            self.add_tag(tag)

    def get_all_tags(self) -> list[str]:
        return sorted(self.tags, key=display_sort_key)

    def tag_exists(self, tag: str) -> bool:
        return tag in self.tags

    def set_all_tags(self, tags: list[str]) -> None:
        self.is_dirty = True
        self._tags = set(tags)


TAG_REPO = TagRepository()
