"""Built-in Lighthouse error definitions.

Declaration order is classification order: when two patterns match the same
protocol text, the definition declared first wins. Keep patterns disjoint.
"""

import re
from typing import Final

from lighthouse_errors.types import ErrorCategory

from .errors import ErrorDefinition

# Screenshot/speedline errors
NO_SPEEDLINE_FRAMES = ErrorDefinition(
    code="NO_SPEEDLINE_FRAMES",
    message_key="didnt_collect_screenshots",
    category=ErrorCategory.SCREENSHOT,
    lhr_runtime_error=True,
)
SPEEDINDEX_OF_ZERO = ErrorDefinition(
    code="SPEEDINDEX_OF_ZERO",
    message_key="didnt_collect_screenshots",
    category=ErrorCategory.SCREENSHOT,
    lhr_runtime_error=True,
)
NO_SCREENSHOTS = ErrorDefinition(
    code="NO_SCREENSHOTS",
    message_key="didnt_collect_screenshots",
    category=ErrorCategory.SCREENSHOT,
    lhr_runtime_error=True,
)
INVALID_SPEEDLINE = ErrorDefinition(
    code="INVALID_SPEEDLINE",
    message_key="didnt_collect_screenshots",
    category=ErrorCategory.SCREENSHOT,
    lhr_runtime_error=True,
)

# Trace parsing errors
NO_TRACING_STARTED = ErrorDefinition(
    code="NO_TRACING_STARTED",
    message_key="bad_trace_recording",
    category=ErrorCategory.TRACE,
    lhr_runtime_error=True,
)
NO_NAVSTART = ErrorDefinition(
    code="NO_NAVSTART",
    message_key="bad_trace_recording",
    category=ErrorCategory.TRACE,
    lhr_runtime_error=True,
)
NO_FCP = ErrorDefinition(
    code="NO_FCP",
    message_key="bad_trace_recording",
    category=ErrorCategory.TRACE,
    lhr_runtime_error=True,
)
NO_DCL = ErrorDefinition(
    code="NO_DCL",
    message_key="bad_trace_recording",
    category=ErrorCategory.TRACE,
    lhr_runtime_error=True,
)
NO_FMP = ErrorDefinition(
    code="NO_FMP",
    message_key="bad_trace_recording",
    category=ErrorCategory.TRACE,
)

# TTI calculation failures
FMP_TOO_LATE_FOR_FCPUI = ErrorDefinition(
    code="FMP_TOO_LATE_FOR_FCPUI",
    message_key="page_load_took_too_long",
    category=ErrorCategory.TTI,
)
NO_FCPUI_IDLE_PERIOD = ErrorDefinition(
    code="NO_FCPUI_IDLE_PERIOD",
    message_key="page_load_took_too_long",
    category=ErrorCategory.TTI,
)
NO_TTI_CPU_IDLE_PERIOD = ErrorDefinition(
    code="NO_TTI_CPU_IDLE_PERIOD",
    message_key="page_load_took_too_long",
    category=ErrorCategory.TTI,
)
NO_TTI_NETWORK_IDLE_PERIOD = ErrorDefinition(
    code="NO_TTI_NETWORK_IDLE_PERIOD",
    message_key="page_load_took_too_long",
    category=ErrorCategory.TTI,
)

# Page load failures
NO_DOCUMENT_REQUEST = ErrorDefinition(
    code="NO_DOCUMENT_REQUEST",
    message_key="page_load_failed",
    category=ErrorCategory.PAGE_LOAD,
    lhr_runtime_error=True,
)
# DevTools reported that loading failed, usually a Chrome-internal issue
FAILED_DOCUMENT_REQUEST = ErrorDefinition(
    code="FAILED_DOCUMENT_REQUEST",
    message_key="page_load_failed_with_details",
    category=ErrorCategory.PAGE_LOAD,
    substitute="No Failure Description Loaded.",
    lhr_runtime_error=True,
)
# Status code was 4xx or 5xx
ERRORED_DOCUMENT_REQUEST = ErrorDefinition(
    code="ERRORED_DOCUMENT_REQUEST",
    message_key="page_load_failed_with_status_code",
    category=ErrorCategory.PAGE_LOAD,
    substitute="No Error Code Loaded.",
    lhr_runtime_error=True,
)
# A security error prevented the page load
INSECURE_DOCUMENT_REQUEST = ErrorDefinition(
    code="INSECURE_DOCUMENT_REQUEST",
    message_key="page_load_failed_insecure",
    category=ErrorCategory.PAGE_LOAD,
    substitute="No Security Descriptions Loaded.",
    lhr_runtime_error=True,
)

# Protocol internal failures
TRACING_ALREADY_STARTED = ErrorDefinition(
    code="TRACING_ALREADY_STARTED",
    message_key="internal_chrome_error",
    category=ErrorCategory.PROTOCOL,
    pattern=re.compile(r"Tracing.*started"),
    lhr_runtime_error=True,
)
PARSING_PROBLEM = ErrorDefinition(
    code="PARSING_PROBLEM",
    message_key="internal_chrome_error",
    category=ErrorCategory.PROTOCOL,
    pattern=re.compile(r"Parsing problem"),
    lhr_runtime_error=True,
)
READ_FAILED = ErrorDefinition(
    code="READ_FAILED",
    message_key="internal_chrome_error",
    category=ErrorCategory.PROTOCOL,
    pattern=re.compile(r"Read failed"),
    lhr_runtime_error=True,
)

# URL parsing failures
INVALID_URL = ErrorDefinition(
    code="INVALID_URL",
    message_key="url_invalid",
    category=ErrorCategory.URL,
)

# Protocol timeout failures
PROTOCOL_TIMEOUT = ErrorDefinition(
    code="PROTOCOL_TIMEOUT",
    message_key="protocol_timeout",
    category=ErrorCategory.PROTOCOL_TIMEOUT,
    substitute="No Method Loaded.",
    lhr_runtime_error=True,
)

# New error kinds are added here; nothing else needs to change.
BUILTIN_DEFINITIONS: Final[tuple[ErrorDefinition, ...]] = (
    NO_SPEEDLINE_FRAMES,
    SPEEDINDEX_OF_ZERO,
    NO_SCREENSHOTS,
    INVALID_SPEEDLINE,
    NO_TRACING_STARTED,
    NO_NAVSTART,
    NO_FCP,
    NO_DCL,
    NO_FMP,
    FMP_TOO_LATE_FOR_FCPUI,
    NO_FCPUI_IDLE_PERIOD,
    NO_TTI_CPU_IDLE_PERIOD,
    NO_TTI_NETWORK_IDLE_PERIOD,
    NO_DOCUMENT_REQUEST,
    FAILED_DOCUMENT_REQUEST,
    ERRORED_DOCUMENT_REQUEST,
    INSECURE_DOCUMENT_REQUEST,
    TRACING_ALREADY_STARTED,
    PARSING_PROBLEM,
    READ_FAILED,
    INVALID_URL,
    PROTOCOL_TIMEOUT,
)
