# SPDX-License-Identifier: MIT

import hashlib
import logging
import threading
from functools import lru_cache
from typing import Optional

import pendulum

from trackline.model.calendar_page import CalendarPage
from trackline.model.event import Event
from trackline.model.laned_event import LanedEvent
from trackline.model.view_mode import ViewMode
from trackline.service.lane import assign_lanes, check_lanes
from trackline.service.page import (
    DEFAULT_LOCALE,
    DEFAULT_WEEK_START,
    page_dates,
    period_label,
)
from trackline.time import normalize

logger = logging.getLogger(__name__)

PAGE_CACHE_SIZE = 256


@lru_cache(maxsize=PAGE_CACHE_SIZE)
def _page_cached(
    base_day: tuple[int, int, int],
    page_index: int,
    mode: ViewMode,
    week_start: int,
    locale: str,
) -> tuple[tuple[pendulum.DateTime, ...], str]:
    year, month, day = base_day
    base_date = pendulum.datetime(year, month, day, tz="local")
    dates = page_dates(base_date, page_index, mode, week_start)
    label = period_label(base_date, page_index, mode, week_start, locale)
    return tuple(dates), label


def cached_calendar_page(
    base_date: pendulum.DateTime,
    page_index: int,
    mode: ViewMode,
    week_start: int = DEFAULT_WEEK_START,
    locale: str = DEFAULT_LOCALE,
) -> CalendarPage:
    """Same as calendar_page, memoized on the day of base_date and the page arguments."""
    day = normalize(base_date)
    dates, label = _page_cached(
        (day.year, day.month, day.day), page_index, mode, int(week_start), locale
    )
    return {"index": page_index, "mode": mode, "dates": list(dates), "label": label}


def clear_page_cache() -> None:
    _page_cached.cache_clear()


def events_fingerprint(events: list[Event]) -> str:
    """Content hash of an event list; input order is part of the hash since it breaks ties."""
    digest = hashlib.sha256()
    for event in events:
        digest.update(
            "\x1f".join(
                (
                    str(event["id"]),
                    event["name"],
                    event["start"].isoformat(),
                    event["end"].isoformat(),
                )
            ).encode()
        )
        digest.update(b"\x1e")
    return digest.hexdigest()


class LaneCache:
    """Keeps the lane assignment of the last event set seen."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fingerprint: Optional[str] = None
        self._laned_events: list[LanedEvent] = []
        self.hits = 0
        self.misses = 0

    def assign_lanes(self, events: list[Event]) -> list[LanedEvent]:
        fingerprint = events_fingerprint(events)
        with self._lock:
            if fingerprint != self._fingerprint:
                self.misses += 1
                logger.debug("event set changed, reassigning lanes")
                laned_events = assign_lanes(events)
                check_lanes(laned_events)
                self._laned_events = laned_events
                self._fingerprint = fingerprint
            else:
                self.hits += 1
            return [
                {
                    "event": laned_event["event"],
                    "day_start": laned_event["day_start"],
                    "day_end": laned_event["day_end"],
                    "lane": laned_event["lane"],
                }
                for laned_event in self._laned_events
            ]

    def clear(self) -> None:
        with self._lock:
            self._fingerprint = None
            self._laned_events = []


LANE_CACHE = LaneCache()
