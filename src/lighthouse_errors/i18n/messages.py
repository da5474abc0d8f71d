"""User-facing message templates for catalog errors.

Each template holds at most one placeholder, written ``{substitute}``.
Several error codes share a template: many causes surface the same guidance.
"""

from typing import Final

SUBSTITUTE: Final[str] = "substitute"

# fmt: off
UI_STRINGS: Final[dict[str, str]] = {
    # Chrome did not collect screenshots during the page load.
    "didnt_collect_screenshots": (
        "Chrome didn't collect any screenshots during the page load. Please make sure there is "
        "content visible on the page, and then try re-running Lighthouse."
    ),
    # The trace over the page load could not be recorded.
    "bad_trace_recording": (
        "Something went wrong with recording the trace over your page load. "
        "Please run Lighthouse again."
    ),
    # The page loaded too slowly to complete the run.
    "page_load_took_too_long": (
        "Your page took too long to load. Please follow the opportunities in the report to "
        "reduce your page load time, and then try re-running Lighthouse."
    ),
    "page_load_failed": (
        "Lighthouse was unable to reliably load the page you requested. Make sure you are "
        "testing the correct URL and that the server is properly responding to all requests."
    ),
    "page_load_failed_with_status_code": (
        "Lighthouse was unable to reliably load the page you requested. Make sure you are "
        "testing the correct URL and that the server is properly responding to all requests.  "
        "Status Code: {substitute}"
    ),
    "page_load_failed_with_details": (
        "Lighthouse was unable to reliably load the page you requested. Make sure you are "
        "testing the correct URL and that the server is properly responding to all requests. "
        "Detailed Error: {substitute}"
    ),
    # The page's security credentials are invalid.
    "page_load_failed_insecure": (
        "The URL you have provided does not have valid security credentials. {substitute}"
    ),
    # Chrome hit an internal error and should be restarted.
    "internal_chrome_error": (
        "An internal Chrome error occurred. Please restart Chrome and try re-running Lighthouse."
    ),
    "request_content_timeout": "Fetching resource content has exceeded the allotted time",
    "url_invalid": "The URL you have provided appears to be invalid.",
    # The DevTools protocol did not answer within the timeout.
    "protocol_timeout": (
        "Waiting for DevTools protocol response has exceeded the allotted time. "
        "Method: {substitute}"
    ),
}
# fmt: on
