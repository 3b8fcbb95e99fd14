# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from trackline.model.view_mode import ViewMode


class CalendarPage(TypedDict):
    index: int
    mode: ViewMode
    dates: list[pendulum.DateTime]
    label: str
