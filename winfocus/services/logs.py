"""
Goal: Set up loguru logging to stderr plus a rolling log file under %LOCALAPPDATA%/WinFocus/logs.
Window titles can carry document names, so keep file logs short-lived.
"""

import sys
from pathlib import Path

from loguru import logger

from winfocus.settings import LOG_DIR, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL, to_file: bool = True) -> None:
    logger.remove()
    stderr = getattr(sys, "stderr", None)
    if stderr and hasattr(stderr, "write"):
        logger.add(stderr, level=level, colorize=True, backtrace=False, diagnose=False)
    if not to_file:
        return
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(Path(LOG_DIR) / "{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="14 days",
        level=level,
        backtrace=False,
        diagnose=False,
        serialize=False,
        enqueue=True,
        encoding="utf-8",
    )
