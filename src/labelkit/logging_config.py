"""Logging setup for labelkit.

Level and format are read from the environment when not passed explicitly:
- LABELKIT_LOG_LEVEL (falls back to LOG_LEVEL): DEBUG, INFO, WARNING, ERROR. Default: INFO
- LABELKIT_LOG_FORMAT (falls back to LOG_FORMAT): 'text' or 'json'. Default: text

The state machine logs every selection transition at DEBUG, so a host editor
can trace label clicks by running with LABELKIT_LOG_LEVEL=DEBUG.

Usage:
    from labelkit.logging_config import configure_logging
    configure_logging()  # Once, when the host editor starts
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, ClassVar

NAMESPACE = "labelkit"

# Attributes every LogRecord carries; anything else was passed through `extra=`
_RECORD_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "msecs",
        "relativeCreated",
        "taskName",
    }
)

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _env(name: str, default: str) -> str:
    return os.environ.get(f"LABELKIT_{name}") or os.environ.get(name) or default


class JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Fields passed with ``extra=`` (for example ``label_id``) end up under the
    ``extra`` key.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string with log data.
        """
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            payload["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            payload["extra"] = extra

        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Human readable lines: TIMESTAMP LEVEL [LOGGER] MESSAGE.

    Logger names lose their ``labelkit.`` prefix. DEBUG and ERROR lines carry
    the file:line they were emitted from.
    """

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize formatter.

        Args:
            use_colors: Whether to use ANSI colors (only honoured on a TTY).
        """
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = f"{record.levelname:8s}"
        if self.use_colors:
            level = f"{self.LEVEL_COLORS.get(record.levelname, '')}{level}{self.RESET}"

        logger_name = record.name.removeprefix(f"{NAMESPACE}.")
        line = f"{timestamp} {level} [{logger_name}] {record.getMessage()}"

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            line += f" ({record.filename}:{record.lineno})"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def get_log_level() -> int:
    """Get log level from environment.

    Returns:
        Logging level constant; INFO for unknown names.
    """
    return _LEVELS.get(_env("LOG_LEVEL", "INFO").upper(), logging.INFO)


def get_log_format() -> str:
    """Get log format from environment.

    Returns:
        'text' or 'json'; anything else falls back to 'text'.
    """
    format_name = _env("LOG_FORMAT", "text").lower()
    return format_name if format_name in ("text", "json") else "text"


def configure_logging(
    level: int | None = None,
    format_type: str | None = None,
    use_colors: bool = True,
) -> None:
    """Attach a single stderr handler to the ``labelkit`` logger.

    Calling it again replaces the previous handler instead of stacking a new one.

    Args:
        level: Log level. If None, read from the environment.
        format_type: 'text' or 'json'. If None, read from the environment.
        use_colors: Whether to color text output (only if stderr is a TTY).
    """
    if level is None:
        level = get_log_level()
    if format_type is None:
        format_type = get_log_format()

    handler = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter(use_colors=use_colors))

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    # The host editor may have its own root handlers
    package_logger.propagate = False

    package_logger.debug(
        "Logging configured: level=%s, format=%s",
        logging.getLevelName(level),
        format_type,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``labelkit`` namespace.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger instance.
    """
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
