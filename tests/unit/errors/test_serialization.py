"""Tests for the error wire format."""

import json

import pytest
from pydantic import ValidationError

from lighthouse_errors.errors import (
    ErrorFactory,
    LighthouseError,
    definitions,
    deserialize,
    from_json,
    serialize,
    to_json,
)


class TestSerialize:
    """Test serialize()."""

    def test_record_shape(self, factory: ErrorFactory) -> None:
        """Test the record carries the rendered message and flattened properties."""
        err = factory.create(
            definitions.PROTOCOL_TIMEOUT,
            {"substitute": "Network.enable", "protocol_method": "Network.enable"},
        )

        record = serialize(err)

        assert record == {
            "code": "PROTOCOL_TIMEOUT",
            "message": err.friendly_message,
            "lhr_runtime_error": True,
            "substitute": "Network.enable",
            "protocol_method": "Network.enable",
        }
        assert "{substitute}" not in record["message"]

    def test_to_dict_matches_serialize(self, factory: ErrorFactory) -> None:
        """Test the method form gives the same record."""
        err = factory.create("NO_FMP")

        assert err.to_dict() == serialize(err)


class TestDeserialize:
    """Test deserialize()."""

    def test_round_trip(self, factory: ErrorFactory) -> None:
        """Test code, message, flag and properties survive a round trip."""
        err = factory.from_protocol_message("Tracing.start", {"message": "Tracing already started"})
        assert isinstance(err, LighthouseError)

        restored = deserialize(serialize(err))

        assert restored.code == err.code
        assert restored.friendly_message == err.friendly_message
        assert restored.lhr_runtime_error is True
        assert restored.properties == err.properties
        assert restored == err

    def test_message_is_not_re_rendered(self) -> None:
        """Test the receiving side uses the transmitted message verbatim."""
        restored = deserialize({"code": "PROTOCOL_TIMEOUT", "message": "Already rendered."})

        assert restored.friendly_message == "Already rendered."
        assert restored.lhr_runtime_error is False

    def test_unknown_code_accepted(self) -> None:
        """Test codes from a newer catalog still deserialize."""
        restored = deserialize({"code": "FUTURE_ERROR", "message": "Something new.", "tab": "1"})

        assert restored.code == "FUTURE_ERROR"
        assert restored.properties == {"tab": "1"}

    def test_stack_is_local(self, factory: ErrorFactory) -> None:
        """Test provenance is recaptured on the receiving side."""
        restored = deserialize(serialize(factory.create("NO_FCP")))

        assert "test_stack_is_local" in restored.stack
        assert "stack" not in restored.properties

    @pytest.mark.parametrize(
        "record",
        [
            {"message": "No code."},
            {"code": "NO_FCP"},
            {"code": 7, "message": "Code is not a string."},
        ],
    )
    def test_invalid_record(self, record: dict) -> None:
        """Test records without a string code and message are rejected."""
        with pytest.raises(ValidationError):
            deserialize(record)

    def test_reserved_extra_field_rejected(self) -> None:
        """Test extra fields cannot smuggle in derived fields."""
        with pytest.raises(ValidationError, match="reserved"):
            deserialize({"code": "NO_FCP", "message": "m", "friendly_message": "other"})

    def test_from_dict(self) -> None:
        """Test the classmethod form."""
        restored = LighthouseError.from_dict({"code": "NO_DCL", "message": "m"})

        assert restored.code == "NO_DCL"


class TestJson:
    """Test JSON helpers."""

    def test_json_round_trip(self, factory: ErrorFactory) -> None:
        """Test errors survive a JSON string boundary."""
        err = factory.create("ERRORED_DOCUMENT_REQUEST", substitute="500", fatal=True)

        text = to_json(err)
        restored = from_json(text)

        assert json.loads(text)["message"].endswith("Status Code: 500")
        assert restored == err

    def test_from_json_rejects_non_object(self) -> None:
        """Test JSON arrays and scalars are rejected."""
        with pytest.raises(ValueError, match="JSON object"):
            from_json("[1, 2]")
