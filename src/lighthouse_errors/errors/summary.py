"""Top-level runtime error summary for reports."""

from pydantic import BaseModel

from .errors import NO_ERROR, UNKNOWN_ERROR, LighthouseError


class RuntimeErrorSummary(BaseModel):
    """Report-level runtime error: ``NO_ERROR`` when the run succeeded."""

    code: str
    message: str = ""


def summarize_runtime_error(error: BaseException | None) -> RuntimeErrorSummary:
    """Summarize the error that ended a run for the report's top level.

    Catalog errors without ``lhr_runtime_error`` are reported per audit only,
    so they summarize as ``NO_ERROR``. Anything outside the catalog, including
    unclassified protocol errors, is ``UNKNOWN_ERROR``.

    Args:
        error: Error that ended the run, or None

    Returns:
        RuntimeErrorSummary
    """
    if error is None:
        return RuntimeErrorSummary(code=NO_ERROR)
    if isinstance(error, LighthouseError):
        if not error.lhr_runtime_error:
            return RuntimeErrorSummary(code=NO_ERROR)
        return RuntimeErrorSummary(code=error.code, message=error.friendly_message)
    return RuntimeErrorSummary(code=UNKNOWN_ERROR, message=str(error))
