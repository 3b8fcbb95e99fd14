# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

WEEK_DAYS: dict[str, int] = {
    "monday": pendulum.MONDAY,
    "tuesday": pendulum.TUESDAY,
    "wednesday": pendulum.WEDNESDAY,
    "thursday": pendulum.THURSDAY,
    "friday": pendulum.FRIDAY,
    "saturday": pendulum.SATURDAY,
    "sunday": pendulum.SUNDAY,
}


def normalize(instant: pendulum.DateTime) -> pendulum.DateTime:
    """Truncate an instant to local midnight of the same calendar day."""
    return instant.in_tz("local").start_of("day")


def today_at_midnight() -> pendulum.DateTime:
    return normalize(pendulum.now("local"))


def next_day(day: pendulum.DateTime) -> pendulum.DateTime:
    return day.add(days=1)


def week_day_from_str(name: str) -> int:
    try:
        return WEEK_DAYS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown week day: {name}")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO-8601 string; values without an offset are read as local time."""
    parsed = pendulum.parse(datetime, tz="local")
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a date time: {datetime}")
    return parsed


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return normalize(cast(pendulum.DateTime, pendulum.parse(date_str, tz="local")))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")
