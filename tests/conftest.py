"""Shared fixtures."""

from datetime import datetime

import pytest

from timephrase.config import manager
from timephrase.utils.clock import FixedClock

# A Friday afternoon
NOW = datetime(2016, 6, 3, 16, 49, 40)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config manager at an empty temporary directory."""
    config_manager = manager.ConfigManager(tmp_path / "config" / "config.json")
    monkeypatch.setattr(manager, "_config_manager", config_manager)
    return config_manager


@pytest.fixture
def clock():
    return FixedClock(NOW)


def clock_at(*args) -> FixedClock:
    """Clock pinned to ``datetime(*args)``."""
    return FixedClock(datetime(*args))
