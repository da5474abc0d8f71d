"""Error registry: the catalog of error definitions."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from lighthouse_errors.i18n import MessageCatalog, get_message_catalog
from lighthouse_errors.logging import get_logger
from lighthouse_errors.types import ErrorCategory

from .definitions import BUILTIN_DEFINITIONS
from .errors import CODE_PATTERN, CatalogError, ErrorDefinition, UnknownErrorCode


class ErrorRegistry:
    """Read-only registry of error definitions, in declaration order.

    Validated once at construction; malformed catalogs fail at startup rather
    than when an error is first raised.
    """

    def __init__(
        self,
        definitions: Iterable[ErrorDefinition] | None = None,
        messages: MessageCatalog | None = None,
    ) -> None:
        """Initialize error registry.

        Args:
            definitions: Error definitions (defaults to BUILTIN_DEFINITIONS)
            messages: Catalog the message keys must resolve in

        Raises:
            CatalogError: If a code is malformed or duplicated, or a message key is unknown
        """
        messages = messages or get_message_catalog()
        entries: dict[str, ErrorDefinition] = {}

        for definition in BUILTIN_DEFINITIONS if definitions is None else definitions:
            if not CODE_PATTERN.match(definition.code):
                raise CatalogError(f"Invalid error code: {definition.code!r}")
            if definition.code in entries:
                raise CatalogError(f"Duplicate error code: {definition.code}")
            if definition.message_key not in messages:
                raise CatalogError(
                    f"Error {definition.code} references unknown message key "
                    f"{definition.message_key!r}"
                )
            entries[definition.code] = definition

        self._definitions = MappingProxyType(entries)
        self._patterned = tuple(d for d in entries.values() if d.pattern is not None)

        get_logger("registry").debug(
            "Error registry built",
            definition_count=len(entries),
            patterned_count=len(self._patterned),
        )

    def lookup(self, code: str) -> ErrorDefinition:
        """Get definition by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorDefinition

        Raises:
            UnknownErrorCode: If code is not registered
        """
        try:
            return self._definitions[code]
        except KeyError:
            raise UnknownErrorCode(code) from None

    def get(self, code: str) -> ErrorDefinition | None:
        """Get definition by error code, or None."""
        return self._definitions.get(code)

    def all_patterned(self) -> tuple[ErrorDefinition, ...]:
        """Definitions that classify protocol text, in declaration order."""
        return self._patterned

    def list_codes(self) -> list[str]:
        """List all registered error codes in declaration order."""
        return list(self._definitions)

    def by_category(self, category: ErrorCategory) -> list[ErrorDefinition]:
        """List definitions in a cause category."""
        return [d for d in self._definitions.values() if d.category == category]

    def __getitem__(self, code: str) -> ErrorDefinition:
        return self.lookup(code)

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[ErrorDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


_default_registry: ErrorRegistry | None = None


def get_error_registry() -> ErrorRegistry:
    """Get the built-in error registry singleton."""
    global _default_registry  # noqa: PLW0603
    if _default_registry is None:
        _default_registry = ErrorRegistry()
    return _default_registry
