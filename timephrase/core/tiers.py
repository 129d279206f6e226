"""Tier definitions, thresholds and the phrase table for relative time."""

import enum
from typing import Dict

MINUTE = 60
HOUR = 60 * 60
DAY = 24 * 60 * 60
WEEK = 7 * DAY  # no tier of its own
MONTH = 30 * DAY
YEAR = 365 * DAY


class Tier(enum.IntEnum):
    """Ordered buckets a duration falls into."""

    JUST_NOW = 0
    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAY_BOUNDARY = 4
    SAME_YEAR = 5
    CROSS_YEAR = 6


class Direction(str, enum.Enum):
    """Whether the target lies before or after now."""

    PAST = "past"
    FUTURE = "future"


# Placeholders: {n} count, {hm} target HH:mm, {md} target MM-dd, {ymd} target yyyy-MM-dd
PHRASES: Dict[Direction, Dict[Tier, str]] = {
    Direction.PAST: {
        Tier.JUST_NOW: "刚刚",
        Tier.SECONDS: "刚刚{n}秒",
        Tier.MINUTES: "{n}分钟前",
        Tier.HOURS: "{n}小时前",
        Tier.DAY_BOUNDARY: "昨天{hm}",
        Tier.SAME_YEAR: "{md}",
        Tier.CROSS_YEAR: "{ymd}",
    },
    Direction.FUTURE: {
        Tier.JUST_NOW: "即将",
        Tier.MINUTES: "{n}分钟后",
        Tier.HOURS: "{n}小时后",
        Tier.DAY_BOUNDARY: "明天{hm}",
        Tier.SAME_YEAR: "{md}",
        Tier.CROSS_YEAR: "{ymd}",
    },
}

# Flat ladder used by the coarse gap descriptions, largest unit first.
# Each entry is (threshold seconds, past phrase, future phrase); a gap must be
# strictly greater than the threshold to use it.
FLAT_UNITS = (
    (YEAR, "{n}年前", "{n}年后"),
    (MONTH, "{n}个月前", "{n}个月后"),
    (DAY, "{n}天前", "{n}天后"),
    (HOUR, "{n}小时前", "{n}小时后"),
    (MINUTE, "{n}分钟前", "{n}分钟后"),
)

WEEKDAYS_LONG = ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六")
WEEKDAYS_SHORT = ("周日", "周一", "周二", "周三", "周四", "周五", "周六")
TODAY = "今天"


def phrase(direction: Direction, tier: Tier, **fields) -> str:
    """Render the phrase for a tier.

    Args:
        direction: Past or future wording
        tier: Tier to render
        **fields: Values for the template placeholders

    Returns:
        Rendered phrase
    """
    return PHRASES[direction][tier].format(**fields)
