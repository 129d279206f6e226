"""Remaining-time phrases for deadlines and expiring orders."""

from datetime import timedelta
from typing import Optional

from loguru import logger

from ..utils.clock import Clock, snapshot
from ..utils.time import (
    CANONICAL_PATTERN,
    millis_between,
    parse_datetime,
    seconds_between,
    trunc_div,
    trunc_mod,
    truncate_seconds,
)
from .errors import InvalidArgument


def deadline_info(deadline: Optional[str], *, clock: Optional[Clock] = None) -> str:
    """Describe the time left until a deadline as "剩余D天H小时M分钟".

    The difference is not clamped. A passed deadline yields negative
    components, e.g. "剩余0天-1小时-5分钟".

    Args:
        deadline: Deadline in ``yyyy-MM-dd HH:mm:ss``
        clock: Source of "now", read once

    Returns:
        Countdown phrase

    Raises:
        InvalidArgument: If the deadline is None
        ParseError: If the deadline is malformed
    """
    if deadline is None:
        raise InvalidArgument("deadline must not be None")

    now = snapshot(clock)
    diff = millis_between(parse_datetime(deadline, CANONICAL_PATTERN), now)
    minutes = trunc_mod(trunc_div(diff, 60 * 1000), 60)
    hours = trunc_mod(trunc_div(diff, 60 * 60 * 1000), 24)
    days = trunc_div(diff, 24 * 60 * 60 * 1000)
    if diff < 0:
        logger.debug(f"Deadline {deadline} passed {-diff}ms ago")
    return f"剩余{days}天{hours}小时{minutes}分钟"


def left_time(created: Optional[str], minutes: int, *, clock: Optional[Clock] = None) -> str:
    """Time left before something created at ``created`` expires.

    Args:
        created: Creation time in ``yyyy-MM-dd HH:mm:ss``
        minutes: How many minutes the item stays valid
        clock: Source of "now", read once

    Returns:
        Phrase such as "14分32秒"; after expiry minutes and seconds use
        floor division, e.g. "-2分55秒" for 65 seconds overdue
    """
    if created is None:
        raise InvalidArgument("created must not be None")

    now = truncate_seconds(snapshot(clock))
    expires = parse_datetime(created, CANONICAL_PATTERN) + timedelta(minutes=minutes)
    left = seconds_between(expires, now)
    return f"{left // 60}分{left % 60}秒"


def describe_seconds(seconds: int) -> str:
    """Break a number of seconds into "H小时M分钟S秒"."""
    hours = trunc_div(seconds, 3600)
    minutes = trunc_div(seconds - hours * 3600, 60)
    rest = seconds - hours * 3600 - minutes * 60
    return f"{hours}小时{minutes}分钟{rest}秒"
