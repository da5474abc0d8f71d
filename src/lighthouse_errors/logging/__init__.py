"""Structured logging - JSON or colored output with trace context."""

from .colors import CYAN, LIGHT_BLUE, MAGENTA, RED, RESET, YELLOW
from .logger import (
    ColoredLogFormatter,
    LighthouseErrorsLogger,
    LogConfig,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
    reset_loggers,
)

__all__ = [
    # Logger classes
    "LighthouseErrorsLogger",
    "LogConfig",
    "StructuredLogFormatter",
    "ColoredLogFormatter",
    "configure_logging",
    "get_logger",
    "reset_loggers",
    # Colors
    "RESET",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "MAGENTA",
]
