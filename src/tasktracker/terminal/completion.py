# SPDX-License-Identifier: MIT

from tasktracker.service.tag import suggest_tags


def complete_tag(incomplete: str) -> list[str]:
    """Return list of matching tags for shell completion."""
    return suggest_tags(incomplete)
