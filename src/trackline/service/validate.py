# SPDX-License-Identifier: MIT

import logging
from typing import Literal, TypeAlias, cast

from trackline.exceptions import ValidationError
from trackline.model.event import Event

logger = logging.getLogger(__name__)

IntervalPolicy: TypeAlias = Literal["reject", "swap"]

INTERVAL_POLICIES: tuple[IntervalPolicy, ...] = ("reject", "swap")


def interval_policy_from_str(value: str) -> IntervalPolicy:
    if value not in INTERVAL_POLICIES:
        raise ValidationError(
            f"invalid_interval_policy must be one of {', '.join(INTERVAL_POLICIES)}, got {value}"
        )
    return cast(IntervalPolicy, value)


def validate_event(event: Event, policy: IntervalPolicy = "reject") -> Event:
    """
    Check that an event does not end before it starts.

    Args:
        event: The event as supplied by the event source
        policy: "reject" raises, "swap" returns a copy with start and end exchanged

    Returns:
        The event itself when valid, otherwise the swapped copy

    Raises:
        ValidationError: If the event ends before it starts and policy is "reject"
    """
    if event["start"] <= event["end"]:
        return event

    if policy == "reject":
        raise ValidationError(
            f"event {event['id']} ({event['name']}) ends before it starts: "
            f"{event['start'].isoformat()} > {event['end'].isoformat()}"
        )

    logger.warning("swapping start and end of event %s (%s)", event["id"], event["name"])
    swapped: Event = {
        "id": event["id"],
        "name": event["name"],
        "start": event["end"],
        "end": event["start"],
    }
    return swapped


def validate_events(events: list[Event], policy: IntervalPolicy = "reject") -> list[Event]:
    return [validate_event(event, policy) for event in events]
