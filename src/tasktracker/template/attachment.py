# SPDX-License-Identifier: MIT

from tasktracker.model.attachment import Attachment
from tasktracker.time import now_utc


def get_attachment_template() -> Attachment:
    return {
        "file_name": "",
        "content_type": None,
        "size": None,
        "bookmark": None,
        "relative_path": None,
        "created": now_utc(),
        "position": 0,
    }
