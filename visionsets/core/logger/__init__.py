"""
Logging Package.

Centralizes console/file logger initialization and formatted progress
reporting for dataset acquisition.

Available Components:

- Logger: Static utility for stream and file logging initialization.
- LogStyle: Unified logging style constants.
- Progress functions: Step and summary logging.
"""

from .logger import ColorFormatter, Logger
from .progress import log_dataset_summary, log_step, progress_level
from .styles import LogStyle

__all__ = [
    "Logger",
    "ColorFormatter",
    "LogStyle",
    "log_dataset_summary",
    "log_step",
    "progress_level",
]
