# SPDX-License-Identifier: MIT

from tasktracker.model.note import WorkNote
from tasktracker.time import now_utc


def get_work_note_template() -> WorkNote:
    return {
        "text": "",
        "created": now_utc(),
        "position": 0,
    }
