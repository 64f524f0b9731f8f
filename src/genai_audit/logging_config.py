"""
Logging configuration for genai_audit.

Configures the package logger with console and rotating file handlers
based on application settings.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from genai_audit.config import Settings, settings

PACKAGE_LOGGER = "genai_audit"

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(STANDARD_FORMAT)


def setup_logging(
    context: str = "app", config: Optional[Settings] = None
) -> logging.Logger:
    """
    Configure the genai_audit logger.

    Calling this more than once replaces the handlers installed by the
    previous call.

    Args:
        context: Name used for the log file (e.g. "worker" -> worker.log)
        config: Settings to use (defaults to the global settings)

    Returns:
        The configured package logger
    """
    config = config or settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.log_level.upper())
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _build_formatter(config.log_format)

    if config.log_console_enabled:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file_enabled:
        log_dir = config.log_directory
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / f"{context}.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
