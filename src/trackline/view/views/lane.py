# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from trackline.model.laned_event import LanedEvent
from trackline.service.lane import lane_count
from trackline.time import datetime_to_display_local_datetime_str
from trackline.view.views.color import lane_color
from trackline.view.views.header import header


def lanes_view(laned_events: list[LanedEvent]) -> None:
    header(f"{len(laned_events)} events in {lane_count(laned_events)} lanes")

    lanes_table = Table(box=box.SIMPLE)
    lanes_table.add_column("lane", justify="right")
    lanes_table.add_column("id")
    lanes_table.add_column("name")
    lanes_table.add_column("start")
    lanes_table.add_column("end")

    for laned_event in sorted(laned_events, key=lambda item: item["lane"]):
        event = laned_event["event"]
        color = lane_color(laned_event["lane"])
        lanes_table.add_row(
            str(laned_event["lane"]),
            event["id"],
            f"[{color}]{event['name']}[/{color}]",
            datetime_to_display_local_datetime_str(event["start"]),
            datetime_to_display_local_datetime_str(event["end"]),
        )

    console = Console()
    console.print(lanes_table)
