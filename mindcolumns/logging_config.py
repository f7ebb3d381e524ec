"""Logging setup for applications embedding mindcolumns.

The library itself only creates module loggers under the ``mindcolumns``
namespace; a host application calls `setup_logging` once at startup.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "mindcolumns"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send ``mindcolumns`` records to stdout, and to `log_file` if given.

    Safe to call again: earlier handlers are replaced. Records stop at the
    package logger so a configured root logger does not print them twice.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
