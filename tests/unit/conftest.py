"""Shared fixtures for unit tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from lighthouse_errors.config import CONFIG_ENV_VAR
from lighthouse_errors.errors import ErrorFactory, ErrorRegistry, reset_error_factory
from lighthouse_errors.i18n import MessageCatalog
from lighthouse_errors.logging import reset_loggers


@pytest.fixture(autouse=True)
def isolate_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep the default factory, loggers and config lookup independent per test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_error_factory()
    reset_loggers()
    yield
    reset_error_factory()
    reset_loggers()


@pytest.fixture
def messages() -> MessageCatalog:
    """Return the built-in English message catalog."""
    return MessageCatalog()


@pytest.fixture
def registry(messages: MessageCatalog) -> ErrorRegistry:
    """Return a registry of the built-in definitions."""
    return ErrorRegistry(messages=messages)


@pytest.fixture
def factory(registry: ErrorRegistry, messages: MessageCatalog) -> ErrorFactory:
    """Return an error factory over the built-in catalog."""
    return ErrorFactory(registry=registry, messages=messages)
