# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Attachment(TypedDict):
    """
    A file attached to a task.

    Exactly one of `bookmark` (a token re-opening a linked file that stays
    where the user keeps it) or `relative_path` (a copy living under the
    attachments directory) is expected to be set. The loader does not
    enforce it.
    """

    file_name: str
    content_type: Optional[str]
    size: Optional[int]
    bookmark: Optional[str]
    relative_path: Optional[str]
    created: pendulum.DateTime
    position: int
