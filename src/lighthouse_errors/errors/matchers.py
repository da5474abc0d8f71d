"""Error matchers for classifying raw protocol failures."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .errors import ErrorDefinition, PropertyValue, ProtocolErrorReport
from .registry import ErrorRegistry, get_error_registry


@dataclass
class MatchResult:
    """Result of matching a protocol failure.

    ``definition`` is None when the failure could not be classified.
    """

    definition: ErrorDefinition | None
    properties: dict[str, PropertyValue] = field(default_factory=dict)


class ErrorMatcher(ABC):
    """Base class for protocol failure matchers."""

    @abstractmethod
    def matches(self, method: str, report: ProtocolErrorReport) -> bool:
        """Check if this matcher handles the failure.

        Args:
            method: Protocol method that failed
            report: Raw failure report

        Returns:
            True if this matcher can handle the failure
        """

    @abstractmethod
    def extract(self, method: str, report: ProtocolErrorReport) -> MatchResult:
        """Extract classification info from the failure.

        Args:
            method: Protocol method that failed
            report: Raw failure report

        Returns:
            MatchResult with definition and properties
        """


class PatternMatcher(ErrorMatcher):
    """Matches protocol text against one definition's pattern."""

    def __init__(self, definition: ErrorDefinition):
        """Initialize pattern matcher.

        Args:
            definition: Definition with a pattern

        Raises:
            ValueError: If the definition has no pattern
        """
        if definition.pattern is None:
            msg = f"Error {definition.code} has no pattern to match"
            raise ValueError(msg)
        self.definition = definition

    def matches(self, method: str, report: ProtocolErrorReport) -> bool:
        return self.definition.matches(report.message)

    def extract(self, method: str, report: ProtocolErrorReport) -> MatchResult:
        return MatchResult(
            definition=self.definition,
            properties={"protocol_method": method, "protocol_error": report.message},
        )


class FallbackMatcher(ErrorMatcher):
    """Fallback matcher for any unclassified failure."""

    def matches(self, method: str, report: ProtocolErrorReport) -> bool:
        """Always matches."""
        return True

    def extract(self, method: str, report: ProtocolErrorReport) -> MatchResult:
        return MatchResult(
            definition=None,
            properties={"protocol_method": method, "protocol_error": report.message},
        )


class ErrorMatcherChain:
    """Ordered chain of matchers. First match wins.

    Catalog declaration order is precedence: a later definition whose pattern
    overlaps an earlier one is never chosen for the overlapping text.
    """

    def __init__(self, registry: ErrorRegistry | None = None) -> None:
        """Initialize matcher chain from the registry's patterned definitions.

        Args:
            registry: Error registry (defaults to the built-in registry)
        """
        if registry is None:
            registry = get_error_registry()
        self.matchers: list[ErrorMatcher] = [
            PatternMatcher(definition) for definition in registry.all_patterned()
        ]
        self.matchers.append(FallbackMatcher())  # Must be last

    def match(self, method: str, report: ProtocolErrorReport) -> MatchResult:
        """Find first matching matcher and extract result.

        Args:
            method: Protocol method that failed
            report: Raw failure report

        Returns:
            MatchResult from first matching matcher
        """
        for matcher in self.matchers:
            if matcher.matches(method, report):
                return matcher.extract(method, report)

        # Unreachable while FallbackMatcher is last
        return FallbackMatcher().extract(method, report)
