"""lighthouse-errors - Lighthouse error taxonomy and protocol error classification.

Maps a fixed catalog of error codes to localizable messages, classifies raw
DevTools protocol failures into that catalog, and carries structured errors
across process boundaries.
"""

from lighthouse_errors.errors import (
    NO_ERROR,
    UNKNOWN_ERROR,
    ErrorDefinition,
    LighthouseError,
    ProtocolError,
    classify,
    create_error,
    deserialize,
    serialize,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "NO_ERROR",
    "UNKNOWN_ERROR",
    "ErrorDefinition",
    "LighthouseError",
    "ProtocolError",
    "classify",
    "create_error",
    "deserialize",
    "serialize",
]
