"""
Logging Configuration
Sets up the 'boxvolume' namespace logger used by every module of the app.
"""
import logging
import sys
from typing import Optional

from boxvolume import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _build_handlers(log_file: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger.

    Args:
        level: Logging level. Defaults to config.LOG_LEVEL (BOXVOLUME_LOG_LEVEL).
        log_file: Path to mirror the log into, overwritten per run.
            Defaults to config.LOG_FILE (BOXVOLUME_LOG_FILE).

    Returns:
        The configured 'boxvolume' logger.
    """
    level = config.LOG_LEVEL if level is None else level
    log_file = config.LOG_FILE if log_file is None else log_file

    logger = logging.getLogger("boxvolume")
    logger.setLevel(level)

    # Calling this twice must not duplicate every line
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized (level=%s, file=%s).", logging.getLevelName(level), log_file or "-")
    return logger
