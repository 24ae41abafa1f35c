from __future__ import annotations

import logging
import sys
from loguru import logger

_LOGGING_CONFIGURED = False


class InterceptHandler(logging.Handler):
    """Forward stdlib records (SQLAlchemy, aiosqlite) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", *, echo_sql: bool = False) -> None:
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(handlers=[InterceptHandler()], level=level.upper(), force=True)
    # SQL statements only when DATABASE_ECHO is set
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if echo_sql else logging.WARNING)

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} - {message}",
        enqueue=True,
        diagnose=False,
        backtrace=False,
    )

    _LOGGING_CONFIGURED = True
