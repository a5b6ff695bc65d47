"""Logging setup for the daylayout CLI.

The library modules only call ``loguru.logger``; sinks are configured once by
the entry point.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
DEBUG_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "5 MB",
    retention: str = "14 days",
) -> None:
    """Route log records to stderr and, optionally, a rotating JSON-lines file.

    Args:
        level: Minimum level for both sinks
        log_file: Path of the file sink; parent directories are created
        rotation: When to start a new file (e.g. "5 MB", "1 day")
        retention: How long rotated files are kept
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=DEBUG_CONSOLE_FORMAT if level == "DEBUG" else CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if not log_file:
        return

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    # One JSON object per record so layouts can be replayed from the log
    logger.add(path, level=level, rotation=rotation, retention=retention, serialize=True, encoding="utf-8")
    logger.debug(f"Writing logs to {path}")
