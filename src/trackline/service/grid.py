# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from trackline.exceptions import EventNotFoundError
from trackline.model.day_column import DayColumn
from trackline.model.entity_id import EntityId
from trackline.model.laned_event import LanedEvent
from trackline.model.view_mode import ViewMode
from trackline.service.lane import is_present_on_day, lane_count
from trackline.service.page import DEFAULT_LOCALE, column_label
from trackline.time import datetime_to_display_local_datetime_str


def build_grid(
    dates: list[pendulum.DateTime],
    laned_events: list[LanedEvent],
    mode: ViewMode,
    locale: str = DEFAULT_LOCALE,
) -> list[DayColumn]:
    """
    Lay laned events out over the dates of a page.

    Every column has one cell per lane in use. A cell holds the first laned
    event of that lane present on the column's date, or None.

    Args:
        dates: The page dates, as produced by page_dates
        laned_events: The output of assign_lanes
        mode: The page granularity, used for the column labels
        locale: Locale for the column labels

    Returns:
        One column per date, in date order
    """
    lanes = lane_count(laned_events)
    columns: list[DayColumn] = []
    for date in dates:
        cells: list[Optional[LanedEvent]] = []
        for lane in range(lanes):
            cells.append(_first_present_in_lane(laned_events, lane, date))
        columns.append(
            {
                "date": date,
                "label": column_label(date, mode, locale),
                "cells": cells,
            }
        )
    return columns


def _first_present_in_lane(
    laned_events: list[LanedEvent], lane: int, date: pendulum.DateTime
) -> Optional[LanedEvent]:
    for laned_event in laned_events:
        if laned_event["lane"] == lane and is_present_on_day(laned_event, date):
            return laned_event
    return None


def events_on_page(
    dates: list[pendulum.DateTime], laned_events: list[LanedEvent]
) -> list[LanedEvent]:
    return [
        laned_event
        for laned_event in laned_events
        if any(is_present_on_day(laned_event, date) for date in dates)
    ]


def find_laned_event(laned_events: list[LanedEvent], event_id: EntityId) -> LanedEvent:
    for laned_event in laned_events:
        if laned_event["event"]["id"] == event_id:
            return laned_event
    raise EventNotFoundError(f"No event with id {event_id}")


def event_details(laned_event: LanedEvent) -> list[tuple[str, str]]:
    """Rows shown when an event is picked from the grid."""
    event = laned_event["event"]
    return [
        ("id", event["id"]),
        ("name", event["name"]),
        ("start", datetime_to_display_local_datetime_str(event["start"])),
        ("end", datetime_to_display_local_datetime_str(event["end"])),
        ("lane", str(laned_event["lane"])),
        ("first day", laned_event["day_start"].to_date_string()),
        ("last day", laned_event["day_end"].to_date_string()),
    ]
