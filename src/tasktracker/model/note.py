# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class WorkNote(TypedDict):
    text: str
    created: pendulum.DateTime
    position: int
