"""Error factory for building Lighthouse errors from definitions and protocol failures."""

from collections.abc import Mapping
from typing import Any

from lighthouse_errors.config import LighthouseErrorsConfig, get_config_loader
from lighthouse_errors.i18n import SUBSTITUTE, MessageCatalog, get_message_catalog
from lighthouse_errors.logging import LogConfig, configure_logging, get_logger

from .errors import (
    ErrorDefinition,
    LighthouseError,
    PropertyValue,
    ProtocolError,
    ProtocolErrorReport,
)
from .matchers import ErrorMatcherChain
from .registry import ErrorRegistry, get_error_registry


class ErrorFactory:
    """Creates Lighthouse errors from catalog definitions and raw protocol failures."""

    def __init__(
        self,
        registry: ErrorRegistry | None = None,
        messages: MessageCatalog | None = None,
        matcher_chain: ErrorMatcherChain | None = None,
    ):
        """Initialize error factory.

        Args:
            registry: Error registry (defaults to the built-in registry)
            messages: Message catalog used to render friendly messages
            matcher_chain: Matcher chain (defaults to one built from registry)
        """
        self.registry = registry if registry is not None else get_error_registry()
        self.messages = messages or get_message_catalog()
        self.matcher_chain = (
            matcher_chain if matcher_chain is not None else ErrorMatcherChain(self.registry)
        )
        self._logger = get_logger("factory")

    @classmethod
    def from_config(cls, config: LighthouseErrorsConfig) -> "ErrorFactory":
        """Build a factory for a configured locale and apply logging settings.

        Args:
            config: Loaded configuration

        Returns:
            ErrorFactory instance
        """
        messages = MessageCatalog.for_locale(config.i18n.locale, config.i18n.locales_dir)
        registry = ErrorRegistry(messages=messages)
        configure_logging(
            LogConfig(
                level=config.logging.level,
                format=config.logging.format,
                truncate_at=config.logging.truncate_at,
            )
        )
        return cls(registry=registry, messages=messages)

    def create(
        self,
        definition: ErrorDefinition | str,
        properties: Mapping[str, PropertyValue] | None = None,
        **kwargs: PropertyValue,
    ) -> LighthouseError:
        """Create an error from a definition (or its code) plus extra properties.

        A ``substitute`` property fills the message placeholder; otherwise the
        definition's default substitute is used.

        Args:
            definition: ErrorDefinition or registered error code
            properties: Extra properties to attach
            **kwargs: Additional properties

        Returns:
            LighthouseError instance

        Raises:
            UnknownErrorCode: If a code is given that is not registered
            UnknownMessageKey: If the definition's message key is not in the catalog
            ValueError: If a property uses a reserved name
        """
        if isinstance(definition, str):
            definition = self.registry.lookup(definition)

        merged: dict[str, PropertyValue] = dict(properties or {})
        merged.update(kwargs)

        substitute = merged.get(SUBSTITUTE)
        if substitute is None:
            substitute = definition.substitute

        if substitute is not None:
            friendly_message = self.messages.render(
                definition.message_key, {SUBSTITUTE: substitute}
            )
        else:
            friendly_message = self.messages.render(definition.message_key)

        return LighthouseError(
            code=definition.code,
            friendly_message=friendly_message,
            lhr_runtime_error=definition.lhr_runtime_error,
            properties=merged,
        )

    def from_protocol_message(
        self,
        method: str,
        report: ProtocolErrorReport | Mapping[str, Any],
    ) -> LighthouseError | ProtocolError:
        """Classify a raw protocol failure.

        Never raises for a well-formed report: text no pattern matches becomes
        a ProtocolError carrying the raw method, message and data.

        Args:
            method: Protocol method that failed, e.g. "Page.navigate"
            report: ``{message, data}`` failure report

        Returns:
            LighthouseError for a classified failure, ProtocolError otherwise
        """
        report = ProtocolErrorReport.coerce(report)
        result = self.matcher_chain.match(method, report)

        if result.definition is None:
            error = ProtocolError.from_report(method, report)
            self._logger.warning(
                "Unclassified protocol error",
                protocol_method=method,
                protocol_error=report.message,
            )
            return error

        self._logger.debug(
            "Protocol error classified",
            error_code=result.definition.code,
            protocol_method=method,
        )
        return self.create(result.definition, result.properties)


# Convenience singleton
_default_factory: ErrorFactory | None = None


def get_error_factory() -> ErrorFactory:
    """Get default error factory singleton, built from the loaded configuration.

    Without a config file the factory uses built-in defaults and leaves logging
    to the host application. A config file that cannot be loaded is logged and
    the built-in defaults are used, so classification never raises.
    """
    global _default_factory  # noqa: PLW0603
    if _default_factory is None:
        _default_factory = _build_default_factory()
    return _default_factory


def _build_default_factory() -> ErrorFactory:
    loader = get_config_loader()
    try:
        config = loader.load()
        if loader.config_path is None:
            return ErrorFactory()
        return ErrorFactory.from_config(config)
    except (ValueError, LookupError, OSError) as e:
        get_logger("factory").warning(
            "Ignoring unusable configuration, using defaults",
            error=str(e),
        )
        return ErrorFactory()


def reset_error_factory() -> None:
    """Drop the default factory so the next call rebuilds it (for testing)."""
    global _default_factory  # noqa: PLW0603
    _default_factory = None


def create_error(code: str, **properties: PropertyValue) -> LighthouseError:
    """Convenience function to create an error by code.

    Args:
        code: Error code
        **properties: Extra properties, including an optional ``substitute``

    Returns:
        LighthouseError instance
    """
    return get_error_factory().create(code, properties)


def classify(
    method: str, report: ProtocolErrorReport | Mapping[str, Any]
) -> LighthouseError | ProtocolError:
    """Convenience function to classify a raw protocol failure.

    Args:
        method: Protocol method that failed
        report: ``{message, data}`` failure report

    Returns:
        LighthouseError or ProtocolError
    """
    return get_error_factory().from_protocol_message(method, report)
