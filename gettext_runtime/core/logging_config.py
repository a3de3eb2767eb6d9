# -*- coding: utf-8 -*-
"""
Logging configuration for command-line entry points.

Routes logs by severity:
- DEBUG, INFO, WARNING -> STDOUT
- ERROR, CRITICAL -> STDERR

The library itself never configures logging; only scripts call setup_logging().
"""

import logging
import sys


class MaxLevelFilter(logging.Filter):
    """
    Allows only records up to a specified level (inclusive).
    Used to prevent ERROR/CRITICAL logs from going to stdout.
    """

    def __init__(self, max_level):
        super().__init__()
        self.max_level = max_level

    def filter(self, record):
        return record.levelno <= self.max_level


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the root logger with stdout/stderr routing.

    Calling it twice replaces the handlers instead of stacking them.

    Returns:
        The root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)
    return root_logger
