"""Shared enumerations for lighthouse-errors."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    COLORED = "colored"
    JSON = "json"


class ErrorCategory(str, Enum):
    """Cause category of a catalog error."""

    SCREENSHOT = "SCREENSHOT"
    TRACE = "TRACE"
    TTI = "TTI"
    PAGE_LOAD = "PAGE_LOAD"
    PROTOCOL = "PROTOCOL"
    URL = "URL"
    PROTOCOL_TIMEOUT = "PROTOCOL_TIMEOUT"
