# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import pendulum
import typer

from trackline.exceptions import TracklineError
from trackline.model.calendar_page import CalendarPage
from trackline.model.laned_event import LanedEvent
from trackline.model.view_mode import ViewMode
from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.repository.event import EVENT_REPO, EventRepository
from trackline.service.cache import LANE_CACHE, cached_calendar_page
from trackline.service.grid import build_grid, events_on_page, find_laned_event
from trackline.service.page import locale_from_str
from trackline.service.validate import interval_policy_from_str
from trackline.terminal.parse import parse_date
from trackline.time import today_at_midnight, week_day_from_str
from trackline.view.views.event import single_event_view
from trackline.view.views.grid import grid_view
from trackline.view.views.lane import lanes_view
from trackline.view.views.page import page_view

ModeOption = Annotated[
    Optional[ViewMode],
    typer.Option(
        "--mode",
        "-m",
        case_sensitive=False,
        help="Page granularity (defaults to default_view_mode from the config)",
    ),
]
OffsetOption = Annotated[
    int,
    typer.Option(
        "--offset",
        "-o",
        help="Signed page offset from the page containing the base date",
    ),
]
BaseOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--base",
        "-b",
        parser=parse_date,
        help="Base date (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
EventsOption = Annotated[
    Optional[Path],
    typer.Option(
        "--events",
        "-e",
        exists=True,
        dir_okay=False,
        help="YAML events file (defaults to events.yaml in the data path)",
    ),
]


def page(
    mode: ModeOption = None,
    offset: OffsetOption = 0,
    base: BaseOption = None,
) -> None:
    """Show the dates covered by a calendar page."""
    try:
        calendar_page, locale = _load_page(mode, offset, base)
    except TracklineError as e:
        _fail(e)
    page_view(calendar_page, locale)


def lanes(events: EventsOption = None) -> None:
    """Show every event with the lane it is assigned to."""
    try:
        laned_events = _load_laned_events(events)
    except TracklineError as e:
        _fail(e)
    lanes_view(laned_events)


def grid(
    mode: ModeOption = None,
    offset: OffsetOption = 0,
    base: BaseOption = None,
    events: EventsOption = None,
) -> None:
    """Show the lanes of a calendar page, one column per date."""
    config = CONFIGURATION_REPO.get_config()
    try:
        calendar_page, locale = _load_page(mode, offset, base)
        laned_events = _load_laned_events(events)
    except TracklineError as e:
        _fail(e)

    if not events_on_page(calendar_page["dates"], laned_events):
        grid_view(calendar_page, [], config["day_width"])
        return

    columns = build_grid(calendar_page["dates"], laned_events, calendar_page["mode"], locale)
    grid_view(calendar_page, columns, config["day_width"])


def show(
    id: Annotated[str, typer.Argument(help="event id")],
    events: EventsOption = None,
) -> None:
    """Show the details of one event and the lane it was given."""
    try:
        laned_event = find_laned_event(_load_laned_events(events), id)
    except TracklineError as e:
        _fail(e)
    single_event_view(laned_event)


def _load_page(
    mode: Optional[ViewMode], offset: int, base: Optional[pendulum.DateTime]
) -> tuple[CalendarPage, str]:
    config = CONFIGURATION_REPO.get_config()
    try:
        week_start = week_day_from_str(str(config["week_start"]))
        view_mode = (
            mode if mode is not None else ViewMode.from_str(str(config["default_view_mode"]))
        )
        locale = locale_from_str(str(config["locale"]))
    except ValueError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    base_date = base if base is not None else today_at_midnight()
    return cached_calendar_page(base_date, offset, view_mode, week_start, locale), locale


def _load_laned_events(events_path: Optional[Path]) -> list[LanedEvent]:
    config = CONFIGURATION_REPO.get_config()
    policy = interval_policy_from_str(config["invalid_interval_policy"])
    repository = EventRepository(events_path) if events_path is not None else EVENT_REPO
    return LANE_CACHE.assign_lanes(repository.get_all_events(policy))


def _fail(error: TracklineError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)
