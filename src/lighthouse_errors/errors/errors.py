"""Lighthouse error types."""

import re
import traceback
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Final

from lighthouse_errors.types import ErrorCategory

# Sentinels for "no error" and "error of an unclassified kind"
NO_ERROR: Final[str] = "NO_ERROR"
UNKNOWN_ERROR: Final[str] = "UNKNOWN_ERROR"

CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Z_]+$")

# Derived from the definition; never taken from caller properties
RESERVED_PROPERTIES: Final[frozenset[str]] = frozenset(
    {"code", "message", "friendly_message", "lhr_runtime_error"}
)

PropertyValue = str | bool | None


class UnknownErrorCode(LookupError):
    """Raised when an error code is not in the catalog."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown error code: {code}")


class CatalogError(ValueError):
    """Raised when the error catalog is malformed."""


@dataclass(frozen=True)
class ErrorDefinition:
    """Catalog entry describing one error kind."""

    code: str  # e.g., "NO_FCP"
    message_key: str  # Key into the message catalog
    category: ErrorCategory
    substitute: str | None = None  # Default placeholder value
    pattern: re.Pattern[str] | None = None  # Classifies raw protocol text
    lhr_runtime_error: bool = False  # Surfaced as the report's top-level runtime error

    def matches(self, text: str) -> bool:
        """Check whether raw protocol text classifies as this error."""
        return self.pattern is not None and self.pattern.search(text) is not None


@dataclass
class LighthouseError(Exception):
    """Structured, classified failure.

    ``code``, ``friendly_message`` and ``lhr_runtime_error`` come from an
    ErrorDefinition; everything else the caller knows about the failure goes
    in ``properties``.
    """

    name: ClassVar[str] = "LHError"

    code: str
    friendly_message: str
    lhr_runtime_error: bool = False
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    stack: str = field(init=False, default="", repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate properties, set Exception message and capture the stack."""
        collisions = RESERVED_PROPERTIES.intersection(self.properties)
        if collisions:
            msg = f"Reserved error properties cannot be overridden: {sorted(collisions)}"
            raise ValueError(msg)

        super().__init__(self.code)
        # Drop the dataclass __init__ and __post_init__ frames
        self.stack = "".join(traceback.format_stack()[:-2])

    def __str__(self) -> str:
        return self.code

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception pickles self.args only, which would drop the dataclass fields
        return (
            self.__class__,
            (self.code, self.friendly_message, self.lhr_runtime_error, dict(self.properties)),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get an extra property."""
        return self.properties.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire record shape.

        Returns:
            Dictionary with code, rendered message and extra properties
        """
        from .serialization import serialize

        return serialize(self)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "LighthouseError":
        """Rebuild an error from a wire record.

        Args:
            record: Mapping produced by to_dict()

        Returns:
            LighthouseError instance
        """
        from .serialization import deserialize

        return deserialize(record)


@dataclass
class ProtocolErrorReport:
    """Raw failure report from the DevTools protocol."""

    message: str
    data: str | None = None

    @classmethod
    def coerce(cls, report: "ProtocolErrorReport | Mapping[str, Any]") -> "ProtocolErrorReport":
        """Accept a report object or a ``{message, data}`` mapping."""
        if isinstance(report, ProtocolErrorReport):
            return report
        message = report.get("message")
        data = report.get("data")
        return cls(
            message="" if message is None else str(message),
            data=None if data is None else str(data),
        )


@dataclass
class ProtocolError(Exception):
    """Unclassified protocol failure. Carries the raw report, no error code."""

    message: str  # Synthesized, e.g. "Protocol error (Page.navigate): boom"
    protocol_method: str
    protocol_error: str
    data: str | None = None

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__,
            (self.message, self.protocol_method, self.protocol_error, self.data),
        )

    @classmethod
    def from_report(cls, method: str, report: ProtocolErrorReport) -> "ProtocolError":
        """Build the fallback error for a report no pattern matched.

        Args:
            method: Protocol method that failed
            report: Raw failure report

        Returns:
            ProtocolError instance
        """
        message = f"Protocol error ({method}): {report.message}"
        if report.data:
            message += f" ({report.data})"
        return cls(
            message=message,
            protocol_method=method,
            protocol_error=report.message,
            data=report.data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reports and logs."""
        return {
            "message": self.message,
            "protocol_method": self.protocol_method,
            "protocol_error": self.protocol_error,
            "data": self.data,
        }
