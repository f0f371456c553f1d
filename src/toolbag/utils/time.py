"""Time period arithmetic.

Periods are named, human-readable spans relative to "now" (today, last
week, this year, ...). Every function that reads the clock accepts an
optional ``now`` so results are reproducible; timestamps are POSIX seconds
interpreted in local time.
"""

from __future__ import annotations

import calendar
import math
from datetime import datetime, timedelta
from enum import Enum

from ..core.config import TimeConfig

_SECONDS_IN_A_MINUTE = 60
_SECONDS_IN_AN_HOUR = 60 * _SECONDS_IN_A_MINUTE
_SECONDS_IN_A_DAY = 24 * _SECONDS_IN_AN_HOUR
_MICROSECONDS_IN_A_SECOND = 1_000_000


class Period(Enum):
    """Named periods of time."""

    ALL_TIME = "all-time"
    THIS_YEAR = "this-year"
    LAST_YEAR = "last-year"
    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"
    THIS_WEEK = "this-week"
    LAST_WEEK = "last-week"
    TODAY = "today"
    YESTERDAY = "yesterday"


def since(timestamp: float, micro: bool = False, now: datetime | None = None) -> dict[str, int]:
    """Elapsed time from ``timestamp`` split into days, hours, minutes, seconds.

    Args:
        timestamp: A timestamp in seconds, or microseconds when ``micro``.
        micro: Whether ``timestamp`` is expressed in microseconds.
        now: Reference time (default: current local time).

    Returns:
        Dictionary with ``days``, ``hours``, ``minutes`` and ``seconds``.
    """
    current = (now or datetime.now()).timestamp()

    if micro:
        microseconds = current * _MICROSECONDS_IN_A_SECOND - float(timestamp)
        seconds = math.floor(microseconds / _MICROSECONDS_IN_A_SECOND)
    else:
        seconds = int(current) - int(timestamp)

    days, hour_seconds = divmod(seconds, _SECONDS_IN_A_DAY)
    hours, minute_seconds = divmod(hour_seconds, _SECONDS_IN_AN_HOUR)
    minutes, remaining = divmod(minute_seconds, _SECONDS_IN_A_MINUTE)

    return {
        "days": int(days),
        "hours": int(hours),
        "minutes": int(minutes),
        "seconds": int(remaining),
    }


def period(value: str | Period | None) -> Period | None:
    """Resolve a human-readable period name.

    Returns:
        The matching Period, ``Period.ALL_TIME`` for None, or None when the
        name is not a known period.
    """
    if value is None:
        return Period.ALL_TIME
    if isinstance(value, Period):
        return value
    try:
        return Period(value)
    except ValueError:
        return None


def when(
    timestamp: float,
    show_time: bool = True,
    now: datetime | None = None,
    config: TimeConfig | None = None,
) -> str:
    """Describe how long ago ``timestamp`` was.

    Events from today are described relatively ("3 hours ago"), events from
    yesterday as "yesterday", anything older as a formatted date.

    Args:
        timestamp: A timestamp in seconds.
        show_time: Include the time of day for older events.
        now: Reference time (default: current local time).
        config: Date formats for older events.
    """
    current = now or datetime.now()
    moment = datetime.fromtimestamp(timestamp)

    if moment.date() == current.date():
        elapsed = since(timestamp, now=current)

        if elapsed["hours"] > 1:
            return f"{elapsed['hours']} hours ago"
        if elapsed["hours"] == 1:
            return "one hour ago"
        if elapsed["minutes"] > 1:
            return f"{elapsed['minutes']} minutes ago"
        if elapsed["minutes"] == 1:
            return "one minute ago"
        if elapsed["seconds"] > 1:
            return f"{elapsed['seconds']} seconds ago"
        return "one second ago"

    if moment.date() == current.date() - timedelta(days=1):
        return "yesterday"

    config = config or TimeConfig()
    return moment.strftime(config.datetime_format if show_time else config.date_format)


def a_while_back(
    period_in_time: str | Period | None,
    prefix: str = "",
    postfix: str = "",
    now: datetime | None = None,
) -> str:
    """Format the given period as a compact date key.

    Example:
        a_while_back(Period.THIS_MONTH, prefix="views_")
        # "views_202406"

    Returns:
        ``prefix + key + postfix``, or an empty string for ``all-time`` and
        unknown periods.
    """
    current = now or datetime.now()
    resolved = period(period_in_time)

    if resolved is Period.TODAY:
        key = current.strftime("%Y%m%d")
    elif resolved is Period.YESTERDAY:
        key = (current - timedelta(days=1)).strftime("%Y%m%d")
    elif resolved is Period.THIS_WEEK:
        key = _week_key(current)
    elif resolved is Period.LAST_WEEK:
        key = _week_key(current - timedelta(weeks=1))
    elif resolved is Period.THIS_MONTH:
        key = current.strftime("%Y%m")
    elif resolved is Period.LAST_MONTH:
        key = (current.replace(day=1) - timedelta(days=1)).strftime("%Y%m")
    elif resolved is Period.THIS_YEAR:
        key = str(current.year)
    elif resolved is Period.LAST_YEAR:
        key = str(current.year - 1)
    else:
        key = ""

    return f"{prefix}{key}{postfix}" if key else key


def min_max_in_period(
    period_in_time: str | Period | None,
    now: datetime | None = None,
) -> tuple[int, int | None]:
    """Range of timestamps (minimum and maximum) covered by a period.

    Periods that include today end at ``now``; closed periods end one second
    before the next one starts.

    Returns:
        ``(min_timestamp, max_timestamp)``. For ``all-time`` and unknown
        periods the range is ``(0, None)``, None meaning unbounded.
    """
    current = now or datetime.now()
    midnight = current.replace(hour=0, minute=0, second=0, microsecond=0)
    monday = midnight - timedelta(days=midnight.weekday())
    first_of_month = midnight.replace(day=1)
    first_of_year = midnight.replace(month=1, day=1)

    resolved = period(period_in_time)

    if resolved is Period.TODAY:
        return _ts(midnight), _ts(current)
    if resolved is Period.YESTERDAY:
        return _ts(midnight - timedelta(days=1)), _ts(midnight) - 1
    if resolved is Period.THIS_WEEK:
        return _ts(monday), _ts(current)
    if resolved is Period.LAST_WEEK:
        return _ts(monday - timedelta(weeks=1)), _ts(monday) - 1
    if resolved is Period.THIS_MONTH:
        return _ts(first_of_month), _ts(current)
    if resolved is Period.LAST_MONTH:
        previous = (first_of_month - timedelta(days=1)).replace(day=1)
        return _ts(previous), _ts(first_of_month) - 1
    if resolved is Period.THIS_YEAR:
        return _ts(first_of_year), _ts(current)
    if resolved is Period.LAST_YEAR:
        previous = first_of_year.replace(year=first_of_year.year - 1)
        return _ts(previous), _ts(first_of_year) - 1

    return 0, None


def date_limits(
    year: int | str,
    month: int | str | None = None,
    day: int | str | None = None,
) -> tuple[datetime, datetime]:
    """Date limits of a year, a month or a day.

    Args:
        year: A year.
        month: A month; the whole year when omitted.
        day: A day; the whole month when omitted.

    Returns:
        ``(first_moment, last_second)`` of the requested period.
    """
    a_year = int(year)
    a_month = 1 if month is None else int(month)
    a_day = 1 if day is None else int(day)

    min_date = datetime(a_year, a_month, a_day)

    if day is not None:
        max_date = min_date.replace(hour=23, minute=59, second=59)
    elif month is not None:
        last_day = calendar.monthrange(a_year, a_month)[1]
        max_date = min_date.replace(day=last_day, hour=23, minute=59, second=59)
    else:
        max_date = datetime(a_year, 12, 31, 23, 59, 59)

    return min_date, max_date


def _week_key(moment: datetime) -> str:
    return f"{moment.year}_{moment.isocalendar()[1]:02d}"


def _ts(moment: datetime) -> int:
    return int(moment.timestamp())
