"""Order cutoff selection.

The day is split into slots by start time; each slot shows the next fixed
cutoff, and the last slot shows the current time itself:

    00:00-11:29  ->  11:30
    11:30-17:59  ->  18:00
    18:00-19:59  ->  20:00
    20:00-23:59  ->  current HH:mm
"""

from bisect import bisect_right
from datetime import datetime
from typing import Optional

from ..config.manager import get_settings
from ..config.models import CutoffConfig, CutoffSlotConfig
from ..utils.clock import Clock, snapshot
from ..utils.time import DATE_PATTERN, format_datetime
from .tiers import TODAY


def cutoff_slot(now: datetime, config: Optional[CutoffConfig] = None) -> CutoffSlotConfig:
    """Find the slot containing the time of day of ``now``.

    Args:
        now: Instant whose hour and minute are used
        config: Slot table, defaults to the configured one

    Returns:
        The matching slot
    """
    slots = (config or get_settings().cutoff).slots
    starts = [slot.start_minute for slot in slots]
    return slots[bisect_right(starts, now.hour * 60 + now.minute) - 1]


def slot_label(now: datetime, config: Optional[CutoffConfig] = None) -> str:
    """Cutoff time shown for ``now``, e.g. "(今天) 18:00"."""
    slot = cutoff_slot(now, config)
    return f"({TODAY}) {slot.label or format_datetime(now, 'HH:mm')}"


def cutoff_label(*, clock: Optional[Clock] = None, config: Optional[CutoffConfig] = None) -> str:
    """Today's date followed by the order cutoff for the current time.

    Args:
        clock: Source of "now", read once
        config: Slot table, defaults to the configured one

    Returns:
        Label such as "2016-06-03 (今天) 18:00"
    """
    now = snapshot(clock)
    return f"{format_datetime(now, DATE_PATTERN)} {slot_label(now, config)}"
