"""Loguru configuration for bottles-core."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def setup_logger(level: str = "INFO", log_dir: Path | None = None) -> None:
    """
    Turn on bottles-core logging.

    The library keeps its logger disabled until this is called.

    Parameters
    ----------
    level : str
        Minimum level for the console sink.
    log_dir : Path, optional
        When given, also write a rotating ``bottles-core.log`` there at DEBUG level.
    """
    logger.remove()
    logger.enable("bottles_core")

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_dir / "bottles-core.log"),
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{function}:{line} | {message}",
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )
