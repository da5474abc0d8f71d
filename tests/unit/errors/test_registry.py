"""Tests for the error registry."""

import re

import pytest

from lighthouse_errors.errors import (
    BUILTIN_DEFINITIONS,
    CatalogError,
    ErrorDefinition,
    ErrorRegistry,
    UnknownErrorCode,
    definitions,
    get_error_registry,
)
from lighthouse_errors.i18n import MessageCatalog
from lighthouse_errors.types import ErrorCategory


class TestBuiltinCatalog:
    """Test the built-in definitions."""

    def test_all_builtin_codes_registered(self, registry: ErrorRegistry) -> None:
        """Test every built-in definition is registered in declaration order."""
        assert registry.list_codes() == [d.code for d in BUILTIN_DEFINITIONS]
        assert len(registry) == 22

    def test_codes_are_well_formed(self, registry: ErrorRegistry) -> None:
        """Test codes are upper-case identifiers."""
        for definition in registry:
            assert re.fullmatch(r"[A-Z_]+", definition.code)

    def test_lookup(self, registry: ErrorRegistry) -> None:
        """Test lookup by code."""
        assert registry.lookup("NO_FCP") is definitions.NO_FCP
        assert registry["PROTOCOL_TIMEOUT"] is definitions.PROTOCOL_TIMEOUT
        assert "READ_FAILED" in registry
        assert "NOT_A_CODE" not in registry

    def test_lookup_unknown_code_raises(self, registry: ErrorRegistry) -> None:
        """Test unknown codes fail with UnknownErrorCode."""
        with pytest.raises(UnknownErrorCode) as exc_info:
            registry.lookup("NOT_A_CODE")

        assert exc_info.value.code == "NOT_A_CODE"
        assert registry.get("NOT_A_CODE") is None

    def test_all_patterned_in_declaration_order(self, registry: ErrorRegistry) -> None:
        """Test only patterned definitions are returned, in catalog order."""
        codes = [d.code for d in registry.all_patterned()]

        assert codes == ["TRACING_ALREADY_STARTED", "PARSING_PROBLEM", "READ_FAILED"]

    def test_by_category(self, registry: ErrorRegistry) -> None:
        """Test definitions can be grouped by cause category."""
        page_load = [d.code for d in registry.by_category(ErrorCategory.PAGE_LOAD)]

        assert page_load == [
            "NO_DOCUMENT_REQUEST",
            "FAILED_DOCUMENT_REQUEST",
            "ERRORED_DOCUMENT_REQUEST",
            "INSECURE_DOCUMENT_REQUEST",
        ]

    def test_shared_templates(self) -> None:
        """Test several codes share one message key."""
        screenshot_keys = {
            d.message_key for d in BUILTIN_DEFINITIONS if d.category == ErrorCategory.SCREENSHOT
        }

        assert screenshot_keys == {"didnt_collect_screenshots"}

    def test_runtime_error_flags(self) -> None:
        """Test which definitions surface as top-level runtime errors."""
        assert definitions.NO_FCP.lhr_runtime_error is True
        assert definitions.NO_FMP.lhr_runtime_error is False
        assert definitions.INVALID_URL.lhr_runtime_error is False

    def test_default_registry_singleton(self) -> None:
        """Test the default registry is built once."""
        assert get_error_registry() is get_error_registry()


class TestCatalogValidation:
    """Test fail-fast validation of catalog authoring mistakes."""

    def test_duplicate_code_rejected(self, messages: MessageCatalog) -> None:
        """Test duplicate codes fail at construction."""
        duplicate = ErrorDefinition(
            code="NO_FCP", message_key="url_invalid", category=ErrorCategory.URL
        )

        with pytest.raises(CatalogError, match="Duplicate"):
            ErrorRegistry([definitions.NO_FCP, duplicate], messages=messages)

    def test_malformed_code_rejected(self, messages: MessageCatalog) -> None:
        """Test codes must match ^[A-Z_]+$."""
        bad = ErrorDefinition(code="no-fcp", message_key="url_invalid", category=ErrorCategory.URL)

        with pytest.raises(CatalogError, match="Invalid error code"):
            ErrorRegistry([bad], messages=messages)

    def test_unknown_message_key_rejected(self, messages: MessageCatalog) -> None:
        """Test message keys must exist in the message catalog."""
        bad = ErrorDefinition(
            code="MISSING_MESSAGE", message_key="does_not_exist", category=ErrorCategory.URL
        )

        with pytest.raises(CatalogError, match="does_not_exist"):
            ErrorRegistry([bad], messages=messages)

    def test_appending_definition_needs_no_other_change(self, messages: MessageCatalog) -> None:
        """Test a new definition is picked up by lookup and classification order."""
        extra = ErrorDefinition(
            code="TARGET_CRASHED",
            message_key="internal_chrome_error",
            category=ErrorCategory.PROTOCOL,
            pattern=re.compile(r"Target crashed"),
            lhr_runtime_error=True,
        )

        registry = ErrorRegistry([*BUILTIN_DEFINITIONS, extra], messages=messages)

        assert registry.lookup("TARGET_CRASHED") is extra
        assert registry.all_patterned()[-1] is extra
