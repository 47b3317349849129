"""
Logging Configuration
=====================

Sets up the ``hexdrift`` logger for a play session. Every module logs through
``logging.getLogger(__name__)``, so one handler set here covers the core and
the tools.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

LOGGER_NAME = "hexdrift"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def session_log_path(log_dir: str, started: Optional[datetime] = None) -> str:
    """
    Path of the log file for a session started at the given time.

    Args:
        log_dir: Directory that holds session logs. Created if missing.
        started: Session start time. Now if None.

    Returns:
        ``<log_dir>/hexdrift_YYYYmmdd_HHMMSS.log``
    """
    if started is None:
        started = datetime.now()
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, started.strftime("hexdrift_%Y%m%d_%H%M%S.log"))


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
        log_file: Also write to this file.
        log_dir: Write a per-session file in this directory. Ignored when
            log_file is given.

    Returns:
        The configured ``hexdrift`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Restarting the game from the same process must not double every line
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is None and log_dir is not None:
        log_file = session_log_path(log_dir)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info("Session log: %s", log_file)

    return logger
