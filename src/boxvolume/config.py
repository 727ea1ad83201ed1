"""
Configuration & Global Constants
================================
This module serves as the central registry for application identity and
global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (decimal places, app names) scattered
   throughout the code.
2. Environment: It resolves the log level and log file from
   ``BOXVOLUME_LOG_LEVEL`` and ``BOXVOLUME_LOG_FILE`` so the app can be made
   verbose without code changes.

Exports:
    DECIMAL_PLACES (int): Fractional digits shown for non-integer volumes.
    LOG_LEVEL (int): Logging level used by the entry point.
    LOG_FILE (str | None): Optional log file path from ``BOXVOLUME_LOG_FILE``.
"""
import logging
import os
from typing import Optional

ORG_ID = "boxvolume"
APP_ID = "box-volume"
VISIBLE_APP_NAME = "Box Volume"

DECIMAL_PLACES: int = 2

LOG_LEVEL_ENV = "BOXVOLUME_LOG_LEVEL"
LOG_FILE_ENV = "BOXVOLUME_LOG_FILE"


def resolve_log_level(name: Optional[str]) -> int:
    """
    Map a level name (e.g. "debug", "WARNING") to a logging constant.
    Unknown or empty names fall back to INFO.
    """
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


LOG_LEVEL: int = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))

# Also mirror the log to this file when set
LOG_FILE: Optional[str] = os.environ.get(LOG_FILE_ENV) or None
