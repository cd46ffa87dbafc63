"""Root logger setup for the quest API and CLI; format comes from settings."""

from __future__ import annotations

import logging
import sys

from app.config import settings


def setup_logging(level: str | None = None) -> None:
    """Send all quest logs to stdout at *level* (settings.log_level if omitted).

    Unknown level names fall back to INFO. Any handlers already on the root
    logger are replaced, so calling this twice does not duplicate output.
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(fmt=settings.log_format, datefmt=settings.log_datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)
