"""Configuration models using Pydantic."""

from pathlib import Path
from typing import List, Optional
import os

from pydantic import BaseModel, Field, field_validator, model_validator


def _minute_of_day(value: str) -> int:
    hour, _, minute = value.partition(":")
    return int(hour) * 60 + int(minute)


class CutoffSlotConfig(BaseModel):
    """A business cutoff window starting at ``start``."""

    name: str = Field(default="", description="Slot name")
    start: str = Field(description="Slot start (HH:MM)")
    label: Optional[str] = Field(
        default=None, description="Cutoff shown for the slot (HH:MM), null for current time"
    )

    @field_validator("start", "label")
    @classmethod
    def check_clock_time(cls, v: Optional[str]) -> Optional[str]:
        """Require HH:MM clock times."""
        if v is None:
            return v
        hour, sep, minute = v.partition(":")
        if (
            not sep
            or len(hour) != 2
            or len(minute) != 2
            or not (hour + minute).isdigit()
            or int(hour) > 23
            or int(minute) > 59
        ):
            raise ValueError(f"Expected HH:MM clock time, got '{v}'")
        return v

    @property
    def start_minute(self) -> int:
        return _minute_of_day(self.start)


class CutoffConfig(BaseModel):
    """Ordered cutoff slots covering a whole day."""

    slots: List[CutoffSlotConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_slots(self) -> "CutoffConfig":
        """Slots must start at midnight and be strictly increasing."""
        if not self.slots:
            raise ValueError("At least one cutoff slot is required")
        starts = [slot.start_minute for slot in self.slots]
        if starts[0] != 0:
            raise ValueError("The first cutoff slot must start at 00:00")
        if any(a >= b for a, b in zip(starts, starts[1:])):
            raise ValueError("Cutoff slot starts must be strictly increasing")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    debug: bool = Field(default=False, description="Enable debug logging")
    log_dir: Optional[str] = Field(default=None, description="Directory for log files")

    @field_validator("log_dir")
    @classmethod
    def expand_path(cls, v: Optional[str]) -> Optional[str]:
        """Expand user home directory in paths."""
        return os.path.expanduser(v) if v else v

    @property
    def log_path(self) -> Optional[Path]:
        return Path(self.log_dir) if self.log_dir else None


class Settings(BaseModel):
    """Complete settings."""

    cutoff: CutoffConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
