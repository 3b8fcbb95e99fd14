# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from trackline.model.entity_id import EntityId


class Event(TypedDict):
    id: EntityId
    name: str
    start: pendulum.DateTime
    end: pendulum.DateTime
