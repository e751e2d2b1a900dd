"""
Logging Module

Logging setup shared by the demo CLI and the API server, driven by the
``logging`` section of the configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from review_filter.utils.config import Config, get_config

PACKAGE_LOGGER = 'review_filter'
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    config: Optional[Config] = None
) -> logging.Logger:
    """
    Configure logging for the review filter.

    Arguments left unset are read from ``logging.level``, ``logging.file``
    and ``logging.format`` of the configuration, so ``LOGGING_LEVEL=DEBUG``
    in the environment raises verbosity without code changes.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional file path for file logging
        format_string: Custom format string
        config: Configuration to read defaults from (global config if None)

    Returns:
        The ``review_filter`` package logger
    """
    config = config or get_config()
    level = level or config.get('logging.level') or 'INFO'
    log_file = log_file or config.get('logging.file')
    format_string = format_string or config.get('logging.format') or DEFAULT_FORMAT

    log_level = logging.getLevelName(str(level).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.debug(f"Logging configured at {logging.getLevelName(log_level)}, file: {log_file}")
    return package_logger
