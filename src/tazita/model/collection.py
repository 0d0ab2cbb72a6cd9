# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from tazita.model.entry import Entry


class Collection(TypedDict):
    entries: list[Entry]
    username: str
    created_at: pendulum.DateTime
