from __future__ import annotations

import logging
from pathlib import Path

import pytest
from loguru import logger

from safetext.logs import InterceptHandler


def data_path() -> Path:
    """
    :return: Absolute path to test fixtures dir
    """
    return Path(__file__).parent / "fixtures"


def read_text(path: Path) -> str:
    """
    :param path: File path
    :return: File contents as UTF-8 text
    """
    return path.read_text(encoding="utf-8")


@pytest.fixture
def restore_logging():
    """
    Undo ``configure_logging()`` after a test: drop loguru sinks, detach the
    intercepting handler and restore the root level.
    """
    root = logging.getLogger()
    level = root.level
    yield
    logger.remove()
    for handler in root.handlers[:]:
        if isinstance(handler, InterceptHandler):
            root.removeHandler(handler)
    root.setLevel(level)
