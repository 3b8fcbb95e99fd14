# SPDX-License-Identifier: MIT

LANE_COLORS = [
    "bright_blue",
    "bright_green",
    "bright_magenta",
    "bright_yellow",
    "bright_cyan",
    "dark_orange",
    "purple",
    "red",
]

EMPTY_CELL_COLOR = "bright_black"


def lane_color(lane: int) -> str:
    return LANE_COLORS[lane % len(LANE_COLORS)]
