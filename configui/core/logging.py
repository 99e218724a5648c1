"""
Logging configuration for the Config UI Example service.
"""
import logging
import sys
from typing import Optional

from loguru import logger

from configui.core.config import Settings, get_settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Standard library loggers whose records are routed into loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


class InterceptHandler(logging.Handler):
    """
    Forward standard ``logging`` records to loguru, keeping the caller location.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back past the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: Optional[Settings] = None):
    """
    Configure logging for the application.

    Replaces loguru's default sink with a stdout sink at ``LOG_LEVEL``, adds an
    optional rotating file sink, and routes uvicorn's standard logging into
    loguru so the whole process writes through the same sinks.
    """
    settings = settings or get_settings()

    logger.remove()  # Remove default handler
    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=settings.LOG_LEVEL,
        diagnose=False
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="10 MB",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=settings.LOG_LEVEL
        )

    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.setLevel(logging.DEBUG)  # loguru sinks do the filtering
        std_logger.propagate = False

    return logger
