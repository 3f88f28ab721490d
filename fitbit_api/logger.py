"""Logging configuration for fitbit_api.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached by applications (the CLI does it through :func:`get_logger`).
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from fitbit_api.config import Config

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger with console and file handlers attached.

    Console output goes to stderr so JSON printed by the CLI stays clean.
    The file handler is skipped when ``Config.LOG_TO_FILE`` is off.
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers if they already exist
    if logger.handlers:
        return logger

    level_name = (level or Config.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if Config.LOG_TO_FILE:
        Config.ensure_directories()
        log_file = Config.LOGS_DIR / f"fitbit_api_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
