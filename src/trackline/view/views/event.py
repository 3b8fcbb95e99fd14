# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from trackline.model.laned_event import LanedEvent
from trackline.service.grid import event_details
from trackline.view.views.header import header


def single_event_view(laned_event: LanedEvent) -> None:
    header("event")

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    for name, value in event_details(laned_event):
        event_table.add_row(name, value)

    console = Console()
    console.print(event_table)
