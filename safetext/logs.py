"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

logs.py – route stdlib logging through a loguru stderr sink.
"""

import logging
import os
import sys

from loguru import logger

DEFAULT_LOG_LEVEL = os.environ.get("SAFETEXT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> <cyan>{name}</cyan> {message}"


class InterceptHandler(logging.Handler):
    """
    Forward stdlib ``logging`` records to loguru, keeping the caller's module
    and the original level name.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """
    Send all log records at or above ``level`` to stderr through loguru.

    Safe to call more than once; each call replaces the previous setup.

    :param level: Level name (``"DEBUG"``) or number (``logging.DEBUG``).
    """
    if isinstance(level, str):
        level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
