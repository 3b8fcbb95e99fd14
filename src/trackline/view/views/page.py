# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from trackline.model.calendar_page import CalendarPage
from trackline.service.page import DEFAULT_LOCALE, column_label
from trackline.view.views.header import header


def page_view(page: CalendarPage, locale: str = DEFAULT_LOCALE) -> None:
    header(f"{page['mode'].value} page {page['index']:+d}")

    page_table = Table(box=box.SIMPLE, title=page["label"])
    page_table.add_column("#", justify="right")
    page_table.add_column("date")
    page_table.add_column("label")

    for position, date in enumerate(page["dates"], start=1):
        page_table.add_row(
            str(position),
            date.to_date_string(),
            column_label(date, page["mode"], locale),
        )

    console = Console()
    console.print(page_table)
