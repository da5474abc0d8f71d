"""Shared types for lighthouse-errors.

Import from here rather than submodules:
    from lighthouse_errors.types import ErrorCategory, LogLevel
"""

from .enums import ErrorCategory, LogFormat, LogLevel
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "ErrorCategory",
    "LogLevel",
    "LogFormat",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
