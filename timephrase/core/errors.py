"""Errors raised by the time phrase helpers."""

from typing import Optional


class ParseError(ValueError):
    """Text does not match the expected date/time pattern."""

    def __init__(self, text: str, pattern: str, reason: Optional[str] = None):
        self.text = text
        self.pattern = pattern
        message = f"'{text}' does not match pattern '{pattern}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidArgument(ValueError):
    """An argument is missing or outside what the helper accepts."""
