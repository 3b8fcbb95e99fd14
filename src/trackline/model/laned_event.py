# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from trackline.model.event import Event


class LanedEvent(TypedDict):
    event: Event
    day_start: pendulum.DateTime
    day_end: pendulum.DateTime
    lane: int
