from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

logger.remove()

LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Configure the global loguru logger.

    Logs go to stderr, or to ``log_file`` when given. The TUI must log to a
    file since stderr would draw over the screen.
    """

    logger.remove()
    level = level.strip().upper()
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, level=level, format=LOG_FORMAT)
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.debug("Logging configured at {level}", level=level)
