"""Message catalog: resolves message keys to rendered, localized strings."""

import string
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol

import yaml

from .messages import SUBSTITUTE, UI_STRINGS

DEFAULT_LOCALE = "en-US"


class UnknownMessageKey(LookupError):
    """Raised when a message key is not in the catalog."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown message key: {key}")


class InvalidTemplate(ValueError):
    """Raised when a template uses anything but a single {substitute} placeholder."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Invalid template for message key {key}: {reason}")


def validate_template(key: str, template: str) -> None:
    """Check a template has no placeholder other than a plain ``{substitute}``.

    Raises:
        InvalidTemplate: On stray braces, positional or other named fields,
            conversions or format specs
    """
    try:
        fields = [
            (name, conversion, spec)
            for _, name, spec, conversion in string.Formatter().parse(template)
            if name is not None
        ]
    except ValueError as e:
        raise InvalidTemplate(key, str(e)) from e

    for name, conversion, spec in fields:
        if name != SUBSTITUTE:
            raise InvalidTemplate(key, f"unsupported placeholder {{{name}}}")
        if conversion or spec:
            raise InvalidTemplate(key, "placeholders take no conversion or format spec")


class MessageRenderer(Protocol):
    """Localization backend: renders a template with substitutions."""

    def render(self, template: str, substitutions: Mapping[str, Any]) -> str:
        """Render a template."""
        ...


class _KeepMissing(dict[str, Any]):
    """Substitution mapping that leaves unknown placeholders in place."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class FormatRenderer:
    """Default renderer based on ``str.format_map``.

    Placeholders without a value are kept as their literal ``{name}`` marker
    so partially populated errors still produce a displayable string.
    """

    def render(self, template: str, substitutions: Mapping[str, Any]) -> str:
        """Render template, keeping unset placeholders literal.

        Args:
            template: Template with ``{name}`` placeholders
            substitutions: Placeholder values; ``None`` counts as unset

        Returns:
            Rendered string
        """
        values = _KeepMissing({k: v for k, v in substitutions.items() if v is not None})
        return template.format_map(values)


def load_translations(path: str | Path) -> dict[str, str]:
    """Load a locale file: a flat YAML mapping of message key to template.

    Args:
        path: Path to the locale YAML file

    Returns:
        Mapping of message key to translated template

    Raises:
        ValueError: If the file is not valid YAML or not a flat string mapping
    """
    with Path(path).open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in locale file {path}: {e}"
            raise ValueError(msg) from e

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        msg = f"Locale file must map message keys to strings: {path}"
        raise ValueError(msg)
    return data


class MessageCatalog:
    """Read-only catalog of message templates.

    Built once at startup. Lookups in a non-default locale fall back to the
    built-in English template when the locale has no override for a key.
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        renderer: MessageRenderer | None = None,
        locale: str = DEFAULT_LOCALE,
        translations: Mapping[str, str] | None = None,
    ):
        """Initialize message catalog.

        Args:
            templates: Base templates (defaults to UI_STRINGS)
            renderer: Localization backend (defaults to FormatRenderer())
            locale: Locale the catalog renders in
            translations: Per-key template overrides for ``locale``

        Raises:
            UnknownMessageKey: If a translation names a key with no base template
            InvalidTemplate: If a base or translated template is malformed
        """
        self._templates = MappingProxyType(dict(templates if templates is not None else UI_STRINGS))
        self._renderer = renderer or FormatRenderer()
        self.locale = locale

        for key, template in self._templates.items():
            validate_template(key, template)

        overrides = dict(translations or {})
        for key in overrides:
            if key not in self._templates:
                raise UnknownMessageKey(key)
            validate_template(key, overrides[key])
        self._translations = MappingProxyType(overrides)

    @classmethod
    def for_locale(
        cls,
        locale: str,
        locales_dir: str | Path | None = None,
        renderer: MessageRenderer | None = None,
    ) -> "MessageCatalog":
        """Build a catalog for a locale, reading ``<locales_dir>/<locale>.yaml`` if present.

        Args:
            locale: Locale identifier, e.g. "de-DE"
            locales_dir: Directory holding locale YAML files
            renderer: Optional localization backend

        Returns:
            MessageCatalog instance
        """
        translations: dict[str, str] = {}
        if locales_dir is not None and locale != DEFAULT_LOCALE:
            locale_file = Path(locales_dir) / f"{locale}.yaml"
            if locale_file.exists():
                translations = load_translations(locale_file)
        return cls(renderer=renderer, locale=locale, translations=translations)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def keys(self) -> list[str]:
        """List all message keys."""
        return list(self._templates)

    def template(self, key: str) -> str:
        """Get the template for a key in the catalog's locale.

        Raises:
            UnknownMessageKey: If key is not in the catalog
        """
        if key not in self._templates:
            raise UnknownMessageKey(key)
        return self._translations.get(key, self._templates[key])

    def render(self, key: str, substitutions: Mapping[str, Any] | None = None) -> str:
        """Render a message.

        Args:
            key: Message key
            substitutions: Placeholder values

        Returns:
            Rendered message

        Raises:
            UnknownMessageKey: If key is not in the catalog
        """
        return self._renderer.render(self.template(key), substitutions or {})


_default_catalog: MessageCatalog | None = None


def get_message_catalog() -> MessageCatalog:
    """Get the default English message catalog."""
    global _default_catalog  # noqa: PLW0603
    if _default_catalog is None:
        _default_catalog = MessageCatalog()
    return _default_catalog
