"""Lighthouse error catalog, classification and serialization."""

from . import definitions
from .definitions import BUILTIN_DEFINITIONS
from .errors import (
    NO_ERROR,
    UNKNOWN_ERROR,
    CatalogError,
    ErrorDefinition,
    LighthouseError,
    ProtocolError,
    ProtocolErrorReport,
    UnknownErrorCode,
)
from .factory import (
    ErrorFactory,
    classify,
    create_error,
    get_error_factory,
    reset_error_factory,
)
from .matchers import ErrorMatcher, ErrorMatcherChain, MatchResult
from .registry import ErrorRegistry, get_error_registry
from .serialization import ErrorRecord, deserialize, from_json, serialize, to_json
from .summary import RuntimeErrorSummary, summarize_runtime_error

__all__ = [
    # Core error types
    "LighthouseError",
    "ProtocolError",
    "ProtocolErrorReport",
    "ErrorDefinition",
    "NO_ERROR",
    "UNKNOWN_ERROR",
    # Catalog
    "definitions",
    "BUILTIN_DEFINITIONS",
    "ErrorRegistry",
    "get_error_registry",
    "CatalogError",
    "UnknownErrorCode",
    # Classification and construction
    "ErrorFactory",
    "ErrorMatcher",
    "ErrorMatcherChain",
    "MatchResult",
    "get_error_factory",
    "reset_error_factory",
    "create_error",
    "classify",
    # Serialization
    "ErrorRecord",
    "serialize",
    "deserialize",
    "to_json",
    "from_json",
    # Reporting
    "RuntimeErrorSummary",
    "summarize_runtime_error",
]
