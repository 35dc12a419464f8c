"""Structured logging configuration for Place Weather.

JSON structured logs go to ``<log_dir>/place_weather.log`` (10MB rotation, 5 backups)
and human-readable logs go to stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "place_weather.log"

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("httpx", "uvicorn.access")


def _json_file_handler(log_dir: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    # Startup URLs and access lines are read from stdout
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure the root logger with a JSON file handler and a console handler.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating JSON log file (defaults to ./logs)

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(log_dir))
    root_logger.addHandler(_console_handler(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured context fields.

    The fields become attributes of the log record and keys in the JSON file
    output, e.g. ``event_type="weather_retrieved"``.
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
