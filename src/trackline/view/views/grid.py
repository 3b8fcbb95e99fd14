# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from trackline.model.calendar_page import CalendarPage
from trackline.model.day_column import DayColumn
from trackline.view.views.color import EMPTY_CELL_COLOR, lane_color
from trackline.view.views.header import header


def grid_view(page: CalendarPage, columns: list[DayColumn], day_width: int = 14) -> None:
    """
    Display a page as a table with one column per date and one row per lane.

    Args:
        page: The page whose dates make up the columns
        columns: The grid built for the page dates
        day_width: Width of each date column in characters
    """
    header(page["label"])

    console = Console()

    if not columns or not columns[0]["cells"]:
        console.print(Text("no events", style=EMPTY_CELL_COLOR))
        return

    grid_table = Table(box=box.SIMPLE_HEAD, show_lines=False)
    grid_table.add_column("lane", justify="right", no_wrap=True)
    for column in columns:
        grid_table.add_column(
            column["label"],
            width=day_width,
            no_wrap=True,
            overflow="ellipsis",
        )

    lanes = len(columns[0]["cells"])
    for lane in range(lanes):
        row: list[Text | str] = [str(lane)]
        for column in columns:
            laned_event = column["cells"][lane]
            if laned_event is None:
                row.append(Text("·", style=EMPTY_CELL_COLOR))
            else:
                row.append(Text(laned_event["event"]["name"], style=lane_color(lane)))
        grid_table.add_row(*row)

    console.print(grid_table)
