"""
Logging setup for the todo service.

Loguru is the single logging backend. Records emitted through the stdlib
``logging`` module (uvicorn, SQLAlchemy) are intercepted and re-emitted by
loguru so everything ends up in the same sink and format.
"""
from __future__ import annotations

import logging
import sys

from loguru import logger

_TEXT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{message}"
)


# PUBLIC_INTERFACE
def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure loguru and route stdlib logging through it.

    Args:
        level: Minimum level name, e.g. "INFO" or "WARNING".
        fmt: "json" for one JSON object per line, anything else for
            human-readable colored output.
    """
    logger.remove()
    level = level.upper()

    if fmt == "json":
        logger.add(sys.stdout, level=level, format="{message}", serialize=True)
    else:
        logger.add(sys.stdout, level=level, format=_TEXT_FORMAT, colorize=True)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for noisy in ("uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


class _InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from the logging module so loguru reports the real caller.
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())
