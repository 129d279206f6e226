"""Pattern-based formatting and parsing of date/time text.

Patterns use the letter layout common to calendar libraries
(``yyyy-MM-dd HH:mm:ss``) rather than strftime directives. ``SS`` is read as
seconds, so the lenient pattern ``yyyy-MM-dd HH:mm:SS`` accepts the same text
as the canonical one.
"""

import re
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Optional

from loguru import logger

from ..core.errors import InvalidArgument, ParseError

CANONICAL_PATTERN = "yyyy-MM-dd HH:mm:ss"
LENIENT_PATTERN = "yyyy-MM-dd HH:mm:SS"
DATE_PATTERN = "yyyy-MM-dd"

_LETTER_RUNS = {
    "yyyy": "%Y",
    "yy": "%y",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
    "SS": "%S",
}

_TOKEN = re.compile(r"'((?:[^']|'')*)'|([A-Za-z])\2*|[^A-Za-z']+")


@lru_cache(maxsize=64)
def to_strftime(pattern: str) -> str:
    """Translate a letter pattern into a strftime format string.

    Args:
        pattern: Pattern such as ``yyyy-MM-dd HH:mm:ss``

    Returns:
        Equivalent strftime format

    Raises:
        InvalidArgument: If the pattern uses an unsupported letter run
    """
    if not pattern:
        raise InvalidArgument("pattern must not be empty")

    parts = []
    pos = 0
    for match in _TOKEN.finditer(pattern):
        if match.start() != pos:
            raise InvalidArgument(f"Unterminated quote in '{pattern}'")
        pos = match.end()
        quoted, letter = match.group(1), match.group(2)
        token = match.group(0)
        if quoted is not None:
            parts.append((quoted.replace("''", "'") or "'").replace("%", "%%"))
        elif letter:
            if token not in _LETTER_RUNS:
                raise InvalidArgument(f"Unsupported pattern letters '{token}' in '{pattern}'")
            parts.append(_LETTER_RUNS[token])
        else:
            parts.append(token.replace("%", "%%"))
    if pos != len(pattern):
        raise InvalidArgument(f"Unterminated quote in '{pattern}'")
    return "".join(parts)


def format_datetime(dt: datetime, pattern: str = CANONICAL_PATTERN) -> str:
    """Format datetime to string.

    Args:
        dt: Datetime to format
        pattern: Letter pattern

    Returns:
        Formatted datetime string
    """
    return dt.strftime(to_strftime(pattern))


def parse_datetime(text: str, pattern: str = CANONICAL_PATTERN) -> datetime:
    """Parse datetime from string.

    Args:
        text: Datetime string
        pattern: Letter pattern

    Returns:
        Parsed datetime

    Raises:
        ParseError: If the text does not match the pattern
    """
    if text is None:
        raise InvalidArgument("text must not be None")
    try:
        return datetime.strptime(text, to_strftime(pattern))
    except ValueError as e:
        logger.warning(f"Failed to parse '{text}' with pattern '{pattern}': {e}")
        raise ParseError(text, pattern, str(e)) from e


def truncate_seconds(dt: datetime) -> datetime:
    """Drop sub-second precision."""
    return dt.replace(microsecond=0)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * trunc_div(a, b)


def seconds_between(later: datetime, earlier: datetime) -> int:
    """Whole seconds from ``earlier`` to ``later``, truncated toward zero."""
    return trunc_div((later - earlier) // timedelta(microseconds=1), 1_000_000)


def millis_between(later: datetime, earlier: datetime) -> int:
    """Whole milliseconds from ``earlier`` to ``later``, truncated toward zero."""
    return trunc_div((later - earlier) // timedelta(microseconds=1), 1_000)


def epoch_millis(dt: datetime) -> int:
    """Milliseconds since the epoch for a local datetime."""
    return trunc_div(int(round(dt.timestamp() * 1_000_000)), 1_000)


def diff_seconds(start: str, end: str) -> int:
    """Get the difference ``start - end`` of two canonical texts in seconds.

    Args:
        start: Start time, ``yyyy-MM-dd HH:mm:ss``
        end: End time, ``yyyy-MM-dd HH:mm:ss``

    Returns:
        Difference in seconds
    """
    return seconds_between(parse_datetime(start), parse_datetime(end))


def diff_hours(start: str, end: str) -> int:
    """Get the difference ``start - end`` of two canonical texts in whole hours."""
    return trunc_div(diff_seconds(start, end), 3600)


def add_minutes(text: Optional[str], minutes: int) -> str:
    """Add minutes to a canonical text.

    Args:
        text: Datetime string, ``yyyy-MM-dd HH:mm:ss``
        minutes: Minutes to add (may be negative)

    Returns:
        Shifted datetime in the canonical pattern
    """
    if text is None:
        raise InvalidArgument("text must not be None")
    return format_datetime(parse_datetime(text) + timedelta(minutes=minutes))


def chinese_date(text: str) -> str:
    """Render a canonical text as ``yyyy年MM月dd日 HH:mm``."""
    return format_datetime(parse_datetime(text), "yyyy'年'MM'月'dd'日' HH:mm")
