"""Logging configuration.

Configures loguru to write human-readable logs to stderr, leaving stdout to
the Markdown output. Standard library logging (httpx, google-auth) is routed
through loguru as well.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

# Libraries whose standard logging records are forwarded to loguru
_LIBRARY_LOGGERS = ["httpx", "httpcore", "google_auth_oauthlib", "google.auth"]


def configure_logging(log_level: str = "INFO", *, quiet: bool = False) -> None:
    """Configure loguru for the CLI.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        quiet: If True, install no sink at all so nothing but the Markdown
            output is written.
    """
    # Remove default handler
    logger.remove()

    if quiet:
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)
        return

    logger.add(
        sys.stderr,
        level=log_level,
        format=_FORMAT,
        colorize=None,
        backtrace=False,
        diagnose=False,
    )

    _intercept_standard_logging(log_level)


def _intercept_standard_logging(log_level: str) -> None:
    """Intercept standard library logging and route to loguru."""

    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            # Get corresponding loguru level
            try:
                level: str | int = logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

            # Find caller from where the logged message originated
            frame, depth = logging.currentframe(), 2
            while frame and frame.f_code.co_filename == logging.__file__:
                frame = frame.f_back
                depth += 1

            logger.opt(depth=depth, exception=record.exc_info).log(
                level, record.getMessage()
            )

    logging.basicConfig(handlers=[InterceptHandler()], level=log_level, force=True)

    # httpx logs every request at INFO; only show that when debugging
    level_no = logging.getLevelName(log_level)
    library_level = (
        level_no if level_no <= logging.DEBUG else max(logging.WARNING, level_no)
    )
    for name in _LIBRARY_LOGGERS:
        library_logger = logging.getLogger(name)
        library_logger.setLevel(library_level)
        library_logger.handlers = [InterceptHandler()]
        library_logger.propagate = False
