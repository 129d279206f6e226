"""Human-readable relative time phrases.

Three families live here:

* ``relative_from_now`` describes a past timestamp ("刚刚", "5分钟前",
  "3小时前", "昨天19:45", "05-03", "2015-05-03").
* ``relative_to_deadline`` is the signed variant that also words future
  targets ("即将", "5分钟后", "明天09:00", ...).
* ``describe_elapsed`` and ``time_gap_info`` use flat year/month/day/hour/minute
  thresholds instead of the calendar-aware ladder.

The hour tier does not end at a flat 24 hours. It ends once the hour count
reaches ``24 - anchor_hour``, where the anchor is the target's hour for past
phrases and the current hour for the signed variant. Later events therefore
reach the "yesterday" wording sooner.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from loguru import logger

from ..utils.clock import Clock, snapshot
from ..utils.time import (
    LENIENT_PATTERN,
    epoch_millis,
    format_datetime,
    millis_between,
    parse_datetime,
    seconds_between,
    trunc_div,
    truncate_seconds,
)
from .tiers import FLAT_UNITS, MINUTE, Direction, Tier, phrase


@dataclass(frozen=True)
class Span:
    """Distance between now and a target, as seen from one side."""

    seconds: int
    anchor_hour: int
    target: datetime
    now: datetime

    @property
    def minutes(self) -> int:
        return trunc_div(self.seconds, 60)

    @property
    def hours(self) -> int:
        return trunc_div(self.minutes, 60)

    @property
    def days(self) -> int:
        return trunc_div(self.hours, 24)


Rule = Tuple[Tier, Callable[[Span], bool]]

# Evaluated in order; the first matching rule wins, CROSS_YEAR otherwise.
LADDER: List[Rule] = [
    (Tier.JUST_NOW, lambda s: s.seconds < MINUTE),
    (Tier.MINUTES, lambda s: s.minutes < 60),
    (Tier.HOURS, lambda s: s.hours < 24 - s.anchor_hour),
    (Tier.DAY_BOUNDARY, lambda s: s.days < 1),
    (Tier.SAME_YEAR, lambda s: s.target.year == s.now.year),
]


def classify(span: Span, ladder: List[Rule] = LADDER) -> Tier:
    """Find the tier a span falls into.

    Args:
        span: Span to classify
        ladder: Ordered (tier, predicate) rules

    Returns:
        The first tier whose predicate holds
    """
    for tier, matches in ladder:
        if matches(span):
            return tier
    return Tier.CROSS_YEAR


def render(direction: Direction, tier: Tier, span: Span) -> str:
    """Render a classified span."""
    count = {Tier.MINUTES: span.minutes, Tier.HOURS: span.hours}.get(tier, span.seconds)
    return phrase(
        direction,
        tier,
        n=count,
        hm=format_datetime(span.target, "HH:mm"),
        md=format_datetime(span.target, "MM-dd"),
        ymd=format_datetime(span.target, "yyyy-MM-dd"),
    )


def relative_from_now(
    text: Optional[str],
    pattern: str = LENIENT_PATTERN,
    *,
    clock: Optional[Clock] = None,
) -> str:
    """Describe how long ago a timestamp was.

    Args:
        text: Timestamp text, ``None`` yields an empty phrase
        pattern: Pattern the text is written in
        clock: Source of "now", read once

    Returns:
        Phrase such as "刚刚", "12分钟前", "3小时前", "昨天19:45", "05-03"
        or "2015-05-03"

    Raises:
        ParseError: If the text does not match the pattern
    """
    if text is None:
        return ""

    now = truncate_seconds(snapshot(clock))
    target = parse_datetime(text, pattern)
    span = Span(seconds_between(now, target), target.hour, target, now)
    tier = classify(span)
    logger.debug(f"'{text}' is {span.seconds}s before {now}: {tier.name}")
    return render(Direction.PAST, tier, span)


def relative_to_deadline(text: Optional[str], *, clock: Optional[Clock] = None) -> str:
    """Describe a timestamp relative to now in either direction.

    A target at or after now is worded as upcoming ("即将", "N分钟后",
    "N小时后", "明天HH:mm"); an earlier one uses the past wording.

    Args:
        text: Timestamp text in ``yyyy-MM-dd HH:mm:SS``, ``None`` yields ""
        clock: Source of "now", read once

    Returns:
        Relative phrase
    """
    if text is None:
        return ""

    now = truncate_seconds(snapshot(clock))
    target = parse_datetime(text, LENIENT_PATTERN)
    elapsed = seconds_between(now, target)
    if elapsed <= 0:
        direction = Direction.FUTURE
        span = Span(-elapsed, now.hour, target, now)
    else:
        direction = Direction.PAST
        span = Span(elapsed, now.hour, target, now)

    tier = classify(span)
    logger.debug(f"'{text}' vs {now}: {direction.value} {tier.name}")
    return render(direction, tier, span)


def _flat_phrase(gap: int, direction: Direction) -> Optional[str]:
    for threshold, past, future in FLAT_UNITS:
        if gap > threshold:
            template = past if direction is Direction.PAST else future
            return template.format(n=trunc_div(gap, threshold))
    return None


def describe_elapsed(timestamp: int, *, clock: Optional[Clock] = None) -> str:
    """Describe the time elapsed since an epoch-millisecond timestamp.

    Gaps below a minute (including negative ones) are reported exactly,
    e.g. "刚刚30秒".
    """
    gap = trunc_div(epoch_millis(snapshot(clock)) - timestamp, 1000)
    return _flat_phrase(gap, Direction.PAST) or phrase(Direction.PAST, Tier.SECONDS, n=gap)


def time_gap_info(text: Optional[str], *, clock: Optional[Clock] = None) -> str:
    """Describe a timestamp with flat units, before or after now.

    Args:
        text: Timestamp text in ``yyyy-MM-dd HH:mm:SS``; blank yields ""
        clock: Source of "now", read once

    Returns:
        Phrase such as "2年前", "3个月后", "刚刚" or "即将"
    """
    if text is None or not text.strip():
        return ""

    now = snapshot(clock)
    target = parse_datetime(text, LENIENT_PATTERN)
    gap = trunc_div(millis_between(now, target), 1000)
    if gap > 0:
        return _flat_phrase(gap, Direction.PAST) or phrase(Direction.PAST, Tier.JUST_NOW)

    gap = trunc_div(millis_between(target, now), 1000)
    return _flat_phrase(gap, Direction.FUTURE) or phrase(Direction.FUTURE, Tier.JUST_NOW)
