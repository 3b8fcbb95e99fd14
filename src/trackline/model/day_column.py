# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from trackline.model.laned_event import LanedEvent


class DayColumn(TypedDict):
    date: pendulum.DateTime
    label: str
    # one cell per lane, None where the lane is empty on this date
    cells: list[Optional[LanedEvent]]
