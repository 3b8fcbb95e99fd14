# SPDX-License-Identifier: MIT

from enum import Enum


class ViewMode(Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_str(cls, value: str) -> "ViewMode":
        return cls(value.strip().lower())
