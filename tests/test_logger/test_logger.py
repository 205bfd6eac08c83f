"""
Test Suite for Logging Management Module.

Tests logger configuration, file rotation, reconfiguration,
and singleton-like behavior.
"""

import inspect
import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from swissraptor.core.constants import LOGGER_NAME
from swissraptor.core.logger import Logger


# LOGGER: INITIALIZATION
@pytest.mark.unit
def test_logger_init_console_only():
    """Test Logger initializes with a console handler only when no log_dir."""
    logger = Logger(name="raptor_test_console", log_dir=None)

    assert logger.name == "raptor_test_console"
    assert len(logger._log.handlers) == 1
    assert logger._log.propagate is False


@pytest.mark.unit
def test_logger_init_with_file(tmp_path):
    """Test Logger adds a rotating file handler when log_dir is provided."""
    log_dir = tmp_path / "logs"

    logger = Logger(name="raptor_test_file", log_dir=log_dir, max_bytes=2048, backup_count=1)

    assert log_dir.exists()
    assert len(logger._log.handlers) == 2
    file_handler = next(h for h in logger._log.handlers if isinstance(h, RotatingFileHandler))
    assert file_handler.maxBytes == 2048
    assert file_handler.backupCount == 1
    assert Logger.get_log_file() == log_dir / "raptor_test_file.log"


@pytest.mark.unit
def test_logger_default_name():
    """Test Logger uses LOGGER_NAME by default."""
    assert inspect.signature(Logger).parameters["name"].default == LOGGER_NAME


@pytest.mark.unit
def test_logger_default_level():
    """Test Logger defaults to INFO level."""
    logger = Logger(name="raptor_test_level")

    assert logger._log.level == logging.INFO


# LOGGER: CONFIGURATION
@pytest.mark.unit
def test_logger_formatter():
    """Test Logger applies the shared formatter to handlers."""
    logger = Logger(name="raptor_test_format")

    formatter = logger._log.handlers[0].formatter

    assert "%(asctime)s" in formatter._fmt
    assert "%(levelname)s" in formatter._fmt
    assert "%(message)s" in formatter._fmt


@pytest.mark.unit
def test_logger_singleton_no_duplicate_handlers():
    """Test repeated construction does not stack handlers."""
    Logger(name="raptor_test_singleton")
    logger = Logger(name="raptor_test_singleton")

    assert len(logger._log.handlers) == 1


@pytest.mark.unit
def test_logger_reconfigure_with_log_dir(tmp_path):
    """Test a later log_dir upgrades a console-only logger."""
    Logger(name="raptor_test_upgrade")
    logger = Logger(name="raptor_test_upgrade", log_dir=tmp_path)

    assert len(logger._log.handlers) == 2


@pytest.mark.unit
def test_logger_writes_to_file(tmp_path):
    """Test records reach the log file."""
    log = Logger(name="raptor_test_write", log_dir=tmp_path).get_logger()
    log.info("Registered modeMapping parameter set")
    for handler in log.handlers:
        handler.flush()

    content = (tmp_path / "raptor_test_write.log").read_text(encoding="utf-8")
    assert "Registered modeMapping parameter set" in content


# LOGGER: SETUP
@pytest.mark.unit
def test_setup_level_from_string():
    """Test setup() maps a level name to the numeric level."""
    log = Logger.setup(name="raptor_test_setup", level="WARNING")
    assert log.level == logging.WARNING

    log = Logger.setup(name="raptor_test_setup", level="debug")
    assert log.level == logging.DEBUG


@pytest.mark.unit
def test_setup_unknown_level_defaults_to_info():
    """Test an unknown level name falls back to INFO."""
    log = Logger.setup(name="raptor_test_unknown", level="VERBOSE")
    assert log.level == logging.INFO


@pytest.mark.unit
def test_setup_debug_env_override():
    """Test DEBUG=1 forces DEBUG level."""
    with patch.dict("os.environ", {"DEBUG": "1"}):
        log = Logger.setup(name="raptor_test_env", level="ERROR")

    assert log.level == logging.DEBUG
