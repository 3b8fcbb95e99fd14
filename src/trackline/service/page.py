# SPDX-License-Identifier: MIT

import logging

import pendulum

from trackline.exceptions import PageRangeError, ValidationError
from trackline.model.calendar_page import CalendarPage
from trackline.model.view_mode import ViewMode
from trackline.time import normalize

logger = logging.getLogger(__name__)

DEFAULT_WEEK_START = pendulum.MONDAY
DEFAULT_LOCALE = "en"

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def page_delta(position: int, center: int) -> int:
    """Convert a raw pager position into the signed page index used here."""
    return position - center


def locale_from_str(name: str) -> str:
    """Check that pendulum can format month and day names in the given locale."""
    locale = name.strip()
    if not locale:
        raise ValidationError("Locale must not be empty")
    try:
        pendulum.locale(locale)
    except (ValueError, ImportError):
        raise ValidationError(f"Unknown locale: {name}")
    return locale


def page_anchor(
    base_date: pendulum.DateTime,
    page_index: int,
    mode: ViewMode,
    week_start: int = DEFAULT_WEEK_START,
) -> pendulum.DateTime:
    """
    Get the first date of a page.

    Args:
        base_date: Any instant on the center page
        page_index: Signed offset from the center page
        mode: Page granularity
        week_start: First day of the week for WEEK pages

    Returns:
        The day-normalized first date of the page

    Raises:
        PageRangeError: If the page lies outside the representable calendar
    """
    base_day = normalize(base_date)
    try:
        if mode is ViewMode.WEEK:
            shifted = base_day.add(weeks=page_index)
            return shifted.subtract(days=(shifted.day_of_week - week_start) % 7)
        if mode is ViewMode.MONTH:
            return base_day.add(months=page_index).start_of("month")
        return base_day.add(years=page_index).start_of("year")
    except (OverflowError, ValueError) as e:
        raise PageRangeError(
            f"{mode.value} page {page_index} from {base_day.to_date_string()} "
            f"is outside the calendar: {e}"
        ) from e


def page_dates(
    base_date: pendulum.DateTime,
    page_index: int,
    mode: ViewMode,
    week_start: int = DEFAULT_WEEK_START,
) -> list[pendulum.DateTime]:
    """
    Get the ordered, day-normalized dates covered by a page.

    WEEK pages hold the 7 days of the week starting on week_start, MONTH pages
    every day of the month and YEAR pages the first day of each of the 12
    months.
    """
    anchor = page_anchor(base_date, page_index, mode, week_start)
    try:
        if mode is ViewMode.WEEK:
            dates = [anchor.add(days=offset) for offset in range(DAYS_PER_WEEK)]
        elif mode is ViewMode.MONTH:
            dates = [anchor.add(days=offset) for offset in range(anchor.days_in_month)]
        else:
            dates = [anchor.add(months=offset) for offset in range(MONTHS_PER_YEAR)]
    except (OverflowError, ValueError) as e:
        raise PageRangeError(
            f"{mode.value} page {page_index} runs past the end of the calendar: {e}"
        ) from e

    logger.debug(
        "%s page %d: %s..%s",
        mode.value,
        page_index,
        dates[0].to_date_string(),
        dates[-1].to_date_string(),
    )
    return [normalize(date) for date in dates]


def period_label(
    base_date: pendulum.DateTime,
    page_index: int,
    mode: ViewMode,
    week_start: int = DEFAULT_WEEK_START,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Label a page with the month and year (or just the year) of its first date."""
    anchor = page_anchor(base_date, page_index, mode, week_start)
    if mode is ViewMode.YEAR:
        return anchor.format("YYYY", locale=locale)
    return anchor.format("MMMM YYYY", locale=locale)


def column_label(
    date: pendulum.DateTime, mode: ViewMode, locale: str = DEFAULT_LOCALE
) -> str:
    if mode is ViewMode.YEAR:
        return date.format("MMMM", locale=locale)
    return date.format("ddd, D", locale=locale)


def calendar_page(
    base_date: pendulum.DateTime,
    page_index: int,
    mode: ViewMode,
    week_start: int = DEFAULT_WEEK_START,
    locale: str = DEFAULT_LOCALE,
) -> CalendarPage:
    return {
        "index": page_index,
        "mode": mode,
        "dates": page_dates(base_date, page_index, mode, week_start),
        "label": period_label(base_date, page_index, mode, week_start, locale),
    }
