"""Localizable message templates and rendering."""

from .catalog import (
    DEFAULT_LOCALE,
    FormatRenderer,
    InvalidTemplate,
    MessageCatalog,
    MessageRenderer,
    UnknownMessageKey,
    get_message_catalog,
    load_translations,
    validate_template,
)
from .messages import SUBSTITUTE, UI_STRINGS

__all__ = [
    "DEFAULT_LOCALE",
    "SUBSTITUTE",
    "UI_STRINGS",
    "FormatRenderer",
    "InvalidTemplate",
    "MessageCatalog",
    "MessageRenderer",
    "UnknownMessageKey",
    "get_message_catalog",
    "load_translations",
    "validate_template",
]
