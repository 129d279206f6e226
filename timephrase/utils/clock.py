"""Sources of the current instant."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current local time."""

    def now(self) -> datetime:  # pragma: no cover - Protocol signature only
        ...


class SystemClock:
    """Clock backed by the host's local time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock pinned to a single instant.

    Useful in tests and wherever several phrases must be rendered against the
    same "now".
    """

    def __init__(self, instant: datetime):
        self.instant = instant
        self.reads = 0

    def now(self) -> datetime:
        self.reads += 1
        return self.instant


def snapshot(clock=None) -> datetime:
    """Read the clock once, falling back to the system clock.

    Args:
        clock: Optional clock to read

    Returns:
        Current datetime
    """
    return (clock or SystemClock()).now()
