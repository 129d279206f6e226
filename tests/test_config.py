"""Tests for configuration loading and saving."""

import json

from timephrase.config.manager import ConfigManager
from timephrase.config.models import Settings


def test_missing_file_gives_defaults(tmp_path):
    """Test that a missing file yields defaults without writing one."""
    manager = ConfigManager(tmp_path / "config.json")
    settings = manager.load()
    assert [slot.start for slot in settings.cutoff.slots] == ["00:00", "11:30", "18:00", "20:00"]
    assert settings.cutoff.slots[-1].label is None
    assert not settings.logging.debug
    assert not (tmp_path / "config.json").exists()


def test_save_then_load(tmp_path):
    """Test that saved settings load back."""
    path = tmp_path / "nested" / "config.json"
    manager = ConfigManager(path)
    settings = manager.load()
    settings.logging.debug = True
    assert manager.save(settings)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["logging"]["debug"] is True
    assert ConfigManager(path).load().logging.debug is True


def test_invalid_file_falls_back_to_defaults(tmp_path):
    """Test fallback to defaults for invalid or unreadable files."""
    path = tmp_path / "config.json"
    path.write_text('{"cutoff": {"slots": [{"start": "05:00"}]}}', encoding="utf-8")
    settings = ConfigManager(path).load()
    assert isinstance(settings, Settings)
    assert settings.cutoff.slots[0].start == "00:00"

    path.write_text("not json", encoding="utf-8")
    assert ConfigManager(path).load().cutoff.slots[1].label == "18:00"


def test_reset_to_defaults(tmp_path):
    """Test that resetting writes and caches defaults."""
    path = tmp_path / "config.json"
    manager = ConfigManager(path)
    settings = manager.reset_to_defaults()
    assert path.exists()
    assert manager.settings is settings


def test_log_dir_expands_home(tmp_path):
    """Test home expansion of the log directory."""
    settings = Settings(
        cutoff={"slots": [{"start": "00:00", "label": None}]},
        logging={"log_dir": "~/logs"},
    )
    assert "~" not in settings.logging.log_dir
    assert settings.logging.log_path.name == "logs"
