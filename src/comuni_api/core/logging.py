"""Loguru logging configuration for the API and the CLI."""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace Loguru's default handler with the comuni-api sinks.

    Records go to stderr. When ``log_dir`` is set they are also written to
    ``comuni-api.log`` there, rotated daily and kept for a week.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(log_path / "comuni-api.log", level=level, format=_LOG_FORMAT, rotation="24h", retention="7 days")
