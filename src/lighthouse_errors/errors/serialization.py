"""Wire format for Lighthouse errors.

The record carries the rendered message, not the template, so the receiving
side needs no message catalog:

    {"code": "NO_FCP", "message": "...", "lhr_runtime_error": true, ...extra}
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from lighthouse_errors.logging import get_logger

from .errors import RESERVED_PROPERTIES, LighthouseError


class ErrorRecord(BaseModel):
    """Plain record for an error crossing a process or network boundary."""

    model_config = ConfigDict(extra="allow")

    code: str
    message: str
    lhr_runtime_error: bool = False

    @model_validator(mode="after")
    def _check_reserved(self) -> "ErrorRecord":
        reserved = RESERVED_PROPERTIES.intersection(self.model_extra or {})
        if reserved:
            msg = f"Record extra fields use reserved names: {sorted(reserved)}"
            raise ValueError(msg)
        return self

    @property
    def properties(self) -> dict[str, Any]:
        """Extra fields, restored as error properties."""
        return dict(self.model_extra or {})


def serialize(err: LighthouseError) -> dict[str, Any]:
    """Convert an error to a plain record.

    Args:
        err: Error to serialize

    Returns:
        Dictionary with code, rendered message, runtime flag and properties
    """
    return {
        "code": err.code,
        "message": err.friendly_message,
        "lhr_runtime_error": err.lhr_runtime_error,
        **err.properties,
    }


def deserialize(record: Mapping[str, Any]) -> LighthouseError:
    """Rebuild an error from a plain record without re-rendering its message.

    Codes unknown to the local catalog are accepted as-is.

    Args:
        record: Mapping produced by serialize()

    Returns:
        LighthouseError instance

    Raises:
        pydantic.ValidationError: If code or message is missing or not a string
    """
    parsed = ErrorRecord.model_validate(dict(record))
    get_logger("serialization").debug("Error deserialized", error_code=parsed.code)
    return LighthouseError(
        code=parsed.code,
        friendly_message=parsed.message,
        lhr_runtime_error=parsed.lhr_runtime_error,
        properties=parsed.properties,
    )


def to_json(err: LighthouseError) -> str:
    """Serialize an error to a JSON string."""
    return json.dumps(serialize(err))


def from_json(text: str | bytes) -> LighthouseError:
    """Rebuild an error from a JSON string.

    Raises:
        ValueError: If the text is not a JSON object
        pydantic.ValidationError: If the record is malformed
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        msg = "Serialized error must be a JSON object"
        raise ValueError(msg)
    return deserialize(data)
