# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

import pytest

from trackline.exceptions import LaneInvariantError
from trackline.model.laned_event import LanedEvent
from trackline.model.view_mode import ViewMode
from trackline.service import cache
from trackline.service.cache import (
    LaneCache,
    cached_calendar_page,
    clear_page_cache,
    events_fingerprint,
)
from trackline.service.lane import assign_lanes
from trackline.service.page import calendar_page

from conftest import local, make_event


@pytest.fixture(autouse=True)
def empty_page_cache() -> Iterator[None]:
    clear_page_cache()
    yield
    clear_page_cache()


def test_cached_page_matches_uncached_page() -> None:
    for mode in ViewMode:
        assert cached_calendar_page(local(2024, 1, 15), -2, mode) == calendar_page(
            local(2024, 1, 15), -2, mode
        )


def test_cached_page_is_keyed_by_day_of_base_date() -> None:
    morning = cached_calendar_page(local(2024, 1, 15, 8), 1, ViewMode.MONTH)
    evening = cached_calendar_page(local(2024, 1, 15, 20), 1, ViewMode.MONTH)
    assert morning == evening


def test_cached_page_returns_independent_copies() -> None:
    first = cached_calendar_page(local(2024, 1, 15), 0, ViewMode.WEEK)
    first["dates"].clear()

    second = cached_calendar_page(local(2024, 1, 15), 0, ViewMode.WEEK)
    assert len(second["dates"]) == 7


def test_events_fingerprint_tracks_content_and_order() -> None:
    a = make_event("a", local(2024, 1, 15), local(2024, 1, 16))
    b = make_event("b", local(2024, 1, 15), local(2024, 1, 16))

    assert events_fingerprint([a, b]) == events_fingerprint([dict(a), dict(b)])  # type: ignore[list-item]
    assert events_fingerprint([a, b]) != events_fingerprint([b, a])
    moved = make_event("a", local(2024, 1, 15), local(2024, 1, 17))
    assert events_fingerprint([a, b]) != events_fingerprint([moved, b])


def test_lane_cache_recomputes_only_when_events_change() -> None:
    cache = LaneCache()
    events = [
        make_event("a", local(2024, 1, 15), local(2024, 1, 17)),
        make_event("b", local(2024, 1, 16), local(2024, 1, 18)),
    ]

    first = cache.assign_lanes(events)
    second = cache.assign_lanes(list(events))
    assert first == second == assign_lanes(events)
    assert (cache.misses, cache.hits) == (1, 1)

    events.append(make_event("c", local(2024, 1, 20), local(2024, 1, 21)))
    assert len(cache.assign_lanes(events)) == 3
    assert cache.misses == 2


def test_lane_cache_results_can_be_mutated_safely() -> None:
    cache = LaneCache()
    events = [make_event("a", local(2024, 1, 15), local(2024, 1, 17))]

    first = cache.assign_lanes(events)
    first[0]["lane"] = 42
    first.clear()

    assert cache.assign_lanes(events)[0]["lane"] == 0


def test_lane_cache_clear() -> None:
    cache = LaneCache()
    events = [make_event("a", local(2024, 1, 15), local(2024, 1, 17))]
    cache.assign_lanes(events)
    cache.clear()
    cache.assign_lanes(events)
    assert cache.misses == 2


@pytest.mark.parametrize("mode", list(ViewMode))
def test_cached_page_before_year_1000(mode: ViewMode) -> None:
    base = local(999, 6, 15)
    for page_index in (-1, 0, 1):
        assert cached_calendar_page(base, page_index, mode) == calendar_page(
            base, page_index, mode
        )


def test_lane_cache_with_concurrent_callers() -> None:
    lane_cache = LaneCache()
    events = [
        make_event(str(i), local(2024, 1, 1 + i % 10, i % 24), local(2024, 1, 12 + i % 5))
        for i in range(40)
    ]
    expected = assign_lanes(events)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: lane_cache.assign_lanes(events), range(64)))

    assert all(result == expected for result in results)
    assert lane_cache.misses == 1
    assert lane_cache.hits == 63


def test_lane_cache_rejects_an_assignment_that_breaks_the_lane_invariant(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    a = make_event("a", local(2024, 1, 15), local(2024, 1, 17))
    b = make_event("b", local(2024, 1, 16), local(2024, 1, 18))

    def single_lane(events: list) -> list[LanedEvent]:
        return [
            {"event": event, "day_start": event["start"], "day_end": event["end"], "lane": 0}
            for event in events
        ]

    monkeypatch.setattr(cache, "assign_lanes", single_lane)
    lane_cache = LaneCache()

    with pytest.raises(LaneInvariantError):
        lane_cache.assign_lanes([a, b])

    monkeypatch.undo()
    assert [laned_event["lane"] for laned_event in lane_cache.assign_lanes([a, b])] == [0, 1]
    assert lane_cache.misses == 2
