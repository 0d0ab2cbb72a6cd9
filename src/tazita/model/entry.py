# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tazita.model.coffee_type import CoffeeType
from tazita.model.entity_id import EntityId


class Entry(TypedDict):
    id: EntityId
    type: CoffeeType
    timestamp: pendulum.DateTime  # When the coffee was logged (UTC)
    date: Optional[str]  # Logical day, YYYY-MM-DD; absent on older records
    notes: Optional[str]
