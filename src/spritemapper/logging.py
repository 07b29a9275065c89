"""Logging configuration for spritemapper.

Library modules only ever call :func:`get_logger`; handlers are installed
by :func:`setup_logging`, which the CLI calls once per invocation.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "spritemapper"
DEFAULT_FORMAT = "%(levelname)-5s | %(name)-22s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)-22s | %(message)s"

# Attributes passed through ``extra=`` that the JSON formatter keeps.
CONTEXT_FIELDS = ("sprite_map", "sprite", "function")

_SETUP_LOCK = threading.Lock()


class JsonFormatter(logging.Formatter):
    """One JSON object per log line, including sprite context fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _stderr_handler(logger: logging.Logger) -> logging.StreamHandler:
    """Replace any console handlers on *logger* with one bound to the current stderr."""
    for h in [h for h in logger.handlers if type(h) is logging.StreamHandler]:
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    logger.addHandler(handler)
    return handler


def _file_handler(logger: logging.Logger, log_file: str) -> logging.FileHandler:
    target = os.path.abspath(log_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == target:
            return h
    handler = logging.FileHandler(log_file)
    logger.addHandler(handler)
    return handler


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    log_file: str | None = None,
    json_logs: bool = False,
) -> None:
    """Configure handlers on the ``spritemapper`` logger.

    Safe to call repeatedly: handlers are reused rather than stacked, so
    each message is emitted once per destination.

    Args:
        level: Logging level (default: INFO).
        verbose: Include timestamps in console output.
        log_file: Optional file to log to in addition to stderr.
        json_logs: Emit JSON lines instead of formatted text.
    """
    with _SETUP_LOCK:
        logger = logging.getLogger(ROOT_LOGGER)
        logger.setLevel(level)

        console = _stderr_handler(logger)
        if json_logs:
            console.setFormatter(JsonFormatter())
        else:
            console.setFormatter(
                logging.Formatter(VERBOSE_FORMAT if verbose else DEFAULT_FORMAT)
            )

        if log_file:
            handler = _file_handler(logger, str(log_file))
            handler.setFormatter(
                JsonFormatter() if json_logs else logging.Formatter(VERBOSE_FORMAT)
            )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a spritemapper module.

    Args:
        name: Module name (e.g., ``"config"``, ``"functions"``).

    Returns:
        A logger instance under the ``spritemapper`` namespace.
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
