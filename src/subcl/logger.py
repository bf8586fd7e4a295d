"""Console and file logging setup for the subcl command line tool.

The library modules only create loggers; handlers are attached here.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

CONSOLE_FORMAT = "%(log_color)s%(levelname)s:%(name)s:%(message)s"
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)'

LOG_COLORS = {
    'DEBUG': 'bold_blue',
    'INFO': 'bold_green',
    'WARNING': 'bold_yellow',
    'ERROR': 'bold_red',
    'CRITICAL': 'bold_purple',
}


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(CONSOLE_FORMAT, log_colors=LOG_COLORS))
    return handler


def _file_handler(path: str) -> logging.Handler:
    max_bytes = int(os.getenv('LOG_FILE_MAX_BYTES', '10485760'))  # 10 MB
    backup_count = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for command line use.

    Args:
        level: Log level name; defaults to SUBCL_LOG_LEVEL, then INFO.
            SUBCL_LOG_FILE additionally enables a rotating log file.
    """
    root = logging.getLogger()
    root.setLevel((level or os.getenv('SUBCL_LOG_LEVEL', 'INFO')).upper())

    if root.hasHandlers():
        return

    root.addHandler(_console_handler())

    log_file = os.getenv('SUBCL_LOG_FILE')
    if log_file:
        root.addHandler(_file_handler(log_file))
