"""Structured logging for lighthouse-errors.

Wraps the standard library ``logging`` module with JSON or colored output and
automatic OpenTelemetry trace context injection.

Usage:
    from lighthouse_errors.logging import get_logger

    logger = get_logger("classifier")
    logger.warning("Unclassified protocol error", protocol_method="Page.navigate")
"""

import json
import logging
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, TextIO

from opentelemetry import trace

from lighthouse_errors.logging.colors import CYAN, LIGHT_BLUE, MAGENTA, RED, RESET, YELLOW
from lighthouse_errors.types import LogFormat, LogLevel

LOGGER_PREFIX = "lighthouse_errors"

# LogRecord attributes that are not user-supplied extra fields
_RECORD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }
)  # fmt: skip

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass
class LogConfig:
    """Logger configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    truncate_at: int = 200
    output: TextIO | None = None  # Defaults to sys.stderr


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        log_data.update(_extra_fields(record))
        return json.dumps(log_data, default=str)


class ColoredLogFormatter(logging.Formatter):
    """Human-readable formatter: ``[COMPONENT] message {context}``."""

    _level_colors = {
        logging.DEBUG: LIGHT_BLUE,
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
    }

    def __init__(self, truncate_at: int = 200):
        super().__init__()
        self.truncate_at = truncate_at

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with ANSI colors."""
        color = self._level_colors.get(record.levelno, RESET)
        component = record.name.removeprefix(f"{LOGGER_PREFIX}.").upper()
        output = f"{MAGENTA}[{component}]{RESET} {color}{record.getMessage()}{RESET}"

        context = _extra_fields(record)
        if context:
            context_str = str(context)
            if len(context_str) > self.truncate_at:
                context_str = context_str[: self.truncate_at] + "..."
            output += f" {LIGHT_BLUE}{context_str}{RESET}"
        return output


class LighthouseErrorsLogger:
    """Structured logger for one component.

    Keyword arguments to the log methods become structured fields.
    """

    def __init__(self, name: str, config: LogConfig | None = None):
        """Initialize logger.

        Args:
            name: Component name
            config: Logger configuration; without one, records propagate to the
                host application's handlers
        """
        self._logger = logging.getLogger(f"{LOGGER_PREFIX}.{name}")
        self.config = config
        if config is not None:
            self.configure(config)

    @property
    def logger(self) -> logging.Logger:
        """Underlying standard library logger."""
        return self._logger

    def configure(self, config: LogConfig) -> None:
        """Apply configuration, replacing the handler this class installed.

        Args:
            config: Logger configuration
        """
        self.config = config
        self._logger.setLevel(_LEVELS.get(config.level, logging.INFO))
        self._logger.propagate = False

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        handler = logging.StreamHandler(config.output or sys.stderr)
        if config.format == LogFormat.COLORED:
            handler.setFormatter(ColoredLogFormatter(config.truncate_at))
        else:
            handler.setFormatter(StructuredLogFormatter())
        self._logger.addHandler(handler)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)


# Silent until the host application or configure_logging() adds handlers
logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())

# Logger cache
_loggers: dict[str, LighthouseErrorsLogger] = {}
_default_config: LogConfig | None = None


def configure_logging(config: LogConfig) -> None:
    """Apply a configuration to all current and future loggers.

    Args:
        config: Logger configuration
    """
    global _default_config  # noqa: PLW0603
    _default_config = config
    for logger in _loggers.values():
        logger.configure(config)


def get_logger(name: str) -> LighthouseErrorsLogger:
    """Get or create a structured logger.

    Args:
        name: Component name

    Returns:
        LighthouseErrorsLogger instance
    """
    if name not in _loggers:
        _loggers[name] = LighthouseErrorsLogger(name, _default_config)
    return _loggers[name]


def reset_loggers() -> None:
    """Reset logger cache and configuration (for testing)."""
    global _loggers, _default_config  # noqa: PLW0603
    for logger in _loggers.values():
        for handler in list(logger.logger.handlers):
            logger.logger.removeHandler(handler)
        logger.logger.propagate = True
        logger.logger.setLevel(logging.NOTSET)
    _loggers = {}
    _default_config = None
