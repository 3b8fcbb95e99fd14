# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from trackline.time import datetime_from_local_date_str, today_at_midnight


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """Parse a date option into local midnight of that day."""
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return datetime_from_local_date_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        try:
            return today_at_midnight().add(days=int(date))
        except (OverflowError, ValueError) as e:
            raise typer.BadParameter(f"Invalid day offset: {e}")

    if date == "today" or date == "t":
        return today_at_midnight()
    if date == "yesterday" or date == "y":
        return today_at_midnight().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_at_midnight().add(days=1)
    raise typer.BadParameter("Incorrect date format")
