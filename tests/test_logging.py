"""Tests for logging setup."""

import pytest
from loguru import logger

from timephrase.config.manager import ConfigManager
from timephrase.utils.logging import setup_from_settings, setup_logging


@pytest.fixture
def reset_logger():
    yield
    logger.remove()


def test_file_sinks_created(tmp_path, reset_logger):
    """Test that the main and error log files receive their levels."""
    setup_logging(tmp_path / "logs", debug=True)
    logger.debug("debug line")
    logger.error("error line")
    logger.complete()

    main_log = (tmp_path / "logs" / "timephrase.log").read_text(encoding="utf-8")
    error_log = (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")
    assert "debug line" in main_log
    assert "error line" in error_log
    assert "debug line" not in error_log


def test_console_only(capsys, reset_logger):
    """Test that without a log directory messages go to stderr at INFO."""
    setup_logging(debug=False)
    logger.info("console line")
    logger.debug("hidden line")
    logger.complete()

    err = capsys.readouterr().err
    assert "Logging initialized (debug=False, log_dir=None)" in err
    assert "console line" in err
    assert "hidden line" not in err


def test_setup_from_settings(tmp_path, reset_logger):
    """Test that logging settings choose the log directory."""
    settings = ConfigManager(tmp_path / "config.json").load()
    settings.logging.log_dir = str(tmp_path / "app-logs")
    setup_from_settings(settings)
    assert (tmp_path / "app-logs" / "timephrase.log").exists()
