"""Logging configuration for the shortlink service.

Provides:
- JsonFormatter: one JSON object per line, request fields included when present
- setup_logging: console (and optional file) handlers on the ``shortlink`` logger
- get_logger: child loggers for the service and transport layers
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional


LOGGER_NAME = "shortlink"

TEXT_FORMAT = "%(asctime)s [PID:%(process)d] [%(levelname)s] %(name)s - %(message)s"

# Attributes set through ``extra=`` by the access log middleware
REQUEST_FIELDS = ("method", "path", "operation", "status_code", "rpc_code", "duration_ms")


class JsonFormatter(logging.Formatter):
    """Formatter emitting each record as a single JSON document.

    The message is serialized, not interpolated into a template, so URLs
    containing quotes or backslashes still yield valid JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }
        for field in REQUEST_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the service logger.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file that receives the same records as stdout
        json_format: Emit JSON lines instead of plain text

    Returns:
        The ``shortlink`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
