"""
Logging and Reporting Package.

Available Components:

- Logger: Utility for console and rotating-file logging initialization.
- LogStyle: Unified logging style constants.
- log_raptor_summary: Summary of the resolved routing configuration.
"""

from .logger import Logger
from .reporter import log_raptor_summary
from .styles import LogStyle

__all__ = [
    "Logger",
    "LogStyle",
    "log_raptor_summary",
]
