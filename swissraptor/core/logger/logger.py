"""
Logging Management Module

Centralized logging setup for the routing configuration. Host applications
usually configure logging themselves; this helper covers standalone use
(scripts, tests) with console output and an optional rotating log file.

Key Features:
    - Singleton-like Behavior: Prevents duplicate handler registration
    - Dynamic Reconfiguration: Adds a file handler once a log directory is known
    - Rotating File Handler: Automatic log rotation with size limits
    - DEBUG=1 environment override for troubleshooting config loading
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from ..constants import LOGGER_NAME

_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


# LOGGER CLASS
class Logger:
    """
    Configures the package logger with console and optional file output.

    Class Attributes:
        _configured_names (dict[str, bool]): Logger names already configured.
        _active_log_file (Path | None): Current log file, if file logging is on.

    Attributes:
        name (str): Logger identifier (typically LOGGER_NAME constant)
        log_dir (Path | None): Directory for log file storage
        level (int): Logging level
        max_bytes (int): Maximum log file size before rotation (default: 1MB)
        backup_count (int): Number of rotated log files to retain (default: 3)

    Example:
        >>> log = Logger.setup(LOGGER_NAME, level="DEBUG")
        >>> log.debug("Registered rangeQuerySettings parameter set")
    """

    _configured_names: Final[dict[str, bool]] = {}
    _active_log_file: Path | None = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Path | None = None,
        level: int = logging.INFO,
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.name = name
        self.log_dir = log_dir
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._log = logging.getLogger(name)

        if name not in Logger._configured_names or log_dir is not None:
            self._setup_logger()
            Logger._configured_names[name] = True

    def _setup_logger(self) -> None:
        """
        Replace existing handlers with a stdout handler and, when log_dir is
        set, a rotating file handler.
        """
        formatter = logging.Formatter(_FORMAT, _DATEFMT)

        self._log.setLevel(self.level)
        self._log.propagate = False

        for handler in self._log.handlers[:]:
            handler.close()
            self._log.removeHandler(handler)

        console_h = logging.StreamHandler(sys.stdout)
        console_h.setFormatter(formatter)
        self._log.addHandler(console_h)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            filename = self.log_dir / f"{self.name}.log"
            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self._log.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """Returns the configured logging.Logger instance."""
        return self._log

    @classmethod
    def get_log_file(cls) -> Path | None:
        """Current log file path, or None if file logging is not enabled."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str = LOGGER_NAME, log_dir: Path | None = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Configure a logger from a level name.

        Args:
            name: Logger identifier (typically LOGGER_NAME constant)
            log_dir: Directory for log file storage (None = console only)
            level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            **kwargs (Any): Additional arguments passed to Logger constructor

        Returns:
            Configured logging.Logger instance

        Environment Variables:
            DEBUG: If set to "1", overrides level to DEBUG
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        instance = cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs)
        # Reconfigure the level even when handlers were already in place
        instance._log.setLevel(numeric_level)
        return instance.get_logger()
