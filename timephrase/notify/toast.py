"""Short-lived notification messages.

Formatting code never talks to a UI toolkit directly; callers hand a
``Notifier`` whatever ``ToastDisplay`` their runtime provides.
"""

import enum
from typing import Optional, Protocol

from loguru import logger


class ToastDuration(enum.IntEnum):
    """How long a toast stays visible, in milliseconds."""

    SHORT = 2000
    LONG = 3500


class ToastDisplay(Protocol):
    """Anything able to show a transient message."""

    def show(self, message: str, duration: ToastDuration) -> None:  # pragma: no cover - Protocol signature only
        ...


class Notifier:
    """Forwards non-empty messages to a display."""

    def __init__(self, display: ToastDisplay):
        self.display = display

    def show_message(self, message: Optional[str], duration: ToastDuration = ToastDuration.SHORT) -> bool:
        """Show a message.

        Args:
            message: Text to show, ignored when None or empty
            duration: How long to show it

        Returns:
            True if the message was handed to the display
        """
        if not message:
            logger.debug("Ignoring empty toast message")
            return False
        self.display.show(str(message), duration)
        return True
