"""Weekday labels.

Day numbers follow the calendar convention 1 = Sunday ... 7 = Saturday.

``weekday_or_today`` only compares the day of month with today's, so a date
exactly one or more months away on the same day number is also labelled
"今天". Callers that need a true same-day test should compare dates.
"""

from datetime import date, datetime
from typing import Optional, Union

from ..utils.clock import Clock, snapshot
from ..utils.time import CANONICAL_PATTERN, parse_datetime
from .errors import InvalidArgument
from .tiers import TODAY, WEEKDAYS_LONG, WEEKDAYS_SHORT

DateLike = Union[date, datetime, str]


def _to_date(value: DateLike) -> date:
    if value is None:
        raise InvalidArgument("date must not be None")
    if isinstance(value, (date, datetime)):
        return value
    if "-" in value:
        return parse_datetime(value, "yyyy-MM-dd").date()
    if "/" in value:
        return parse_datetime(value, "yyyy/MM/dd").date()
    raise InvalidArgument(f"Unrecognised date '{value}', expected yyyy-MM-dd or yyyy/MM/dd")


def day_of_week(value: DateLike) -> int:
    """Get the day of week, 1 for Sunday through 7 for Saturday.

    Args:
        value: A date, a datetime, or text in ``yyyy-MM-dd`` / ``yyyy/MM/dd``

    Returns:
        Day number
    """
    return _to_date(value).isoweekday() % 7 + 1


def long_weekday(value: DateLike) -> str:
    """Weekday as "星期日" ... "星期六"."""
    return WEEKDAYS_LONG[day_of_week(value) - 1]


def short_weekday(value: DateLike) -> str:
    """Weekday as "周日" ... "周六"."""
    return WEEKDAYS_SHORT[day_of_week(value) - 1]


def weekday_or_today(value: DateLike, *, clock: Optional[Clock] = None) -> str:
    """Short weekday, or "今天" when the day of month matches today's."""
    day = _to_date(value)
    if day.day == snapshot(clock).day:
        return TODAY
    return short_weekday(day)


def date_with_weekday(text: str, *, clock: Optional[Clock] = None) -> str:
    """Render a canonical timestamp as a reservation label.

    Args:
        text: Timestamp in ``yyyy-MM-dd HH:mm:ss``
        clock: Source of "now", read once

    Returns:
        Label such as "2016-6-3 (今天) 16:49" or "2016-6-5 (周日) 09:00"
    """
    if text is None:
        raise InvalidArgument("text must not be None")
    dt = parse_datetime(text, CANONICAL_PATTERN)
    label = weekday_or_today(dt, clock=clock)
    return f"{dt.year}-{dt.month}-{dt.day} ({label}) {text[11:16]}"
