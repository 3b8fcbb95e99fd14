# SPDX-License-Identifier: MIT

import logging
from itertools import combinations

import pendulum

from trackline.exceptions import LaneInvariantError
from trackline.model.event import Event
from trackline.model.laned_event import LanedEvent
from trackline.time import next_day, normalize

logger = logging.getLogger(__name__)


def assign_lanes(events: list[Event]) -> list[LanedEvent]:
    """
    Assign every event to the lowest lane that is free at its start.

    Events are processed in ascending start order (stable, so ties keep their
    input order). A lane is free for an event when the end of the last event
    placed in it is strictly before the event's start. Both instants are
    compared raw, not day-normalized, so an event ending exactly when the next
    one starts keeps its lane busy.

    The greedy first-free-lane rule uses the minimum number of lanes for
    1-dimensional intervals.

    Args:
        events: Events in any order

    Returns:
        One laned event per input event, in processing order
    """
    sorted_events = sorted(events, key=lambda event: event["start"])

    # lane_ends[k] is the end of the last event placed in lane k
    lane_ends: list[pendulum.DateTime] = []
    laned_events: list[LanedEvent] = []

    for event in sorted_events:
        lane = _first_free_lane(lane_ends, event["start"])
        if lane is None:
            lane_ends.append(event["end"])
            lane = len(lane_ends) - 1
        else:
            lane_ends[lane] = event["end"]

        laned_events.append(
            {
                "event": event,
                "day_start": normalize(event["start"]),
                "day_end": normalize(event["end"]),
                "lane": lane,
            }
        )

    logger.debug("assigned %d events to %d lanes", len(laned_events), len(lane_ends))
    return laned_events


def _first_free_lane(
    lane_ends: list[pendulum.DateTime], start: pendulum.DateTime
) -> int | None:
    for lane, lane_end in enumerate(lane_ends):
        if lane_end < start:
            return lane
    return None


def lane_count(laned_events: list[LanedEvent]) -> int:
    if not laned_events:
        return 0
    return max(laned_event["lane"] for laned_event in laned_events) + 1


def is_present_on_day(laned_event: LanedEvent, day: pendulum.DateTime) -> bool:
    """
    Whether a laned event occupies the given day.

    The day range is treated as inclusive of the event's last day: the event is
    present when it starts before the next day and its day end is not before
    this day. This is a looser test than the lane-freedom check in
    assign_lanes, so two events sharing a lane can both be present on the day
    where one ends and the next starts.
    """
    day_start = normalize(day)
    return (
        laned_event["day_start"] < next_day(day_start)
        and laned_event["day_end"] >= day_start
    )


def check_lanes(laned_events: list[LanedEvent]) -> None:
    """Raise LaneInvariantError if two events in one lane are not separated."""
    by_lane: dict[int, list[LanedEvent]] = {}
    for laned_event in laned_events:
        by_lane.setdefault(laned_event["lane"], []).append(laned_event)

    for lane, lane_events in by_lane.items():
        for first, second in combinations(lane_events, 2):
            if first["event"]["start"] > second["event"]["start"]:
                first, second = second, first
            if not first["event"]["end"] < second["event"]["start"]:
                raise LaneInvariantError(
                    f"lane {lane}: {first['event']['id']} overlaps {second['event']['id']}"
                )
