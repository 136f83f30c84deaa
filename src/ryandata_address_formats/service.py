"""Address format lookup service.

The service resolves a country code (and optional locale) into a fully
populated AddressFormat:

1. Load the raw definition for the country code, falling back to the
   default ``ZZ`` definition when the source has none.
2. Merge the translation for the requested locale, if the definition
   has one.
3. Build the AddressFormat, failing with DataIntegrityError when the
   resolved record is incomplete.

Raw definitions are cached per service instance for its whole lifetime,
including negative results. AddressFormat objects are built fresh on
every call since the translation applied can differ between calls.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Final

from ryandata_address_formats.data import DefinitionSourceFactory
from ryandata_address_formats.models import AddressFormat, RawDefinition
from ryandata_address_formats.protocols import DefinitionSourceProtocol
from ryandata_address_formats.translation import apply_translation

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_CODE: Final = "ZZ"


class _Missing:
    """Tombstone cached for country codes the source has no definition for."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Final = _Missing()


class AddressFormatService:
    """Lookup service for per-country address formats.

    Example:
        >>> service = AddressFormatService()
        >>> service.get("US").administrative_area_type
        <AdministrativeAreaType.STATE: 'state'>
        >>> service.get("CA", "fr").format.splitlines()[-1]
        '{locality} ({administrative_area}) {postal_code}'
    """

    def __init__(
        self,
        source: DefinitionSourceProtocol | None = None,
        *,
        source_type: str | None = None,
        **source_kwargs: Any,
    ) -> None:
        """Initialize the service.

        Args:
            source: Definition source to read from. If None, one is created
                through DefinitionSourceFactory.
            source_type: Source type to create when no source is given.
                Defaults to the bundled JSON definitions.
            **source_kwargs: Arguments for the created source's constructor.
        """
        if source is None:
            source = DefinitionSourceFactory.create(source_type, **source_kwargs)
        self._source = source
        self._definitions: dict[str, RawDefinition | _Missing] = {}
        self._lock = threading.Lock()

    @property
    def source(self) -> DefinitionSourceProtocol:
        """The definition source backing this service."""
        return self._source

    @property
    def cached_country_codes(self) -> list[str]:
        """Country codes whose definitions (or absence) are cached."""
        with self._lock:
            return sorted(self._definitions)

    def get(self, country_code: str, locale: str | None = None) -> AddressFormat:
        """Get the address format for a country.

        Unknown country codes transparently resolve to the ``ZZ`` format.

        Args:
            country_code: Country code to look up.
            locale: Locale to translate the format to, in ``en-US`` or
                ``en_US`` form. If None, the untranslated format is returned.

        Returns:
            Fully populated AddressFormat.

        Raises:
            DataIntegrityError: If the resolved definition is malformed or
                lacks a mandatory field.
        """
        definition = self._load_definition(country_code)
        if definition is None:
            logger.debug(
                "No address format for %r, falling back to %s", country_code, DEFAULT_COUNTRY_CODE
            )
            definition = self._load_definition(DEFAULT_COUNTRY_CODE)
            if definition is None:
                # ZZ must exist; without it construction fails on the empty record
                definition = RawDefinition(country_code=DEFAULT_COUNTRY_CODE)

        definition = apply_translation(definition, locale)
        return AddressFormat.from_definition(definition)

    def get_all(self, locale: str | None = None) -> dict[str, AddressFormat]:
        """Get the address formats of every country the source knows.

        This reads every definition and is meant for bulk export, not for
        per-request use. All definitions end up in the cache.

        Args:
            locale: Locale to translate the formats to.

        Returns:
            Dict mapping country code to AddressFormat.
        """
        return {code: self.get(code, locale) for code in self._source.list_country_codes()}

    def _load_definition(self, country_code: str) -> RawDefinition | None:
        """Load a raw definition through the cache.

        The source is queried at most once per country code; the lock is
        held across the fetch so concurrent first requests share it.

        Args:
            country_code: Country code to load.

        Returns:
            RawDefinition if the source has one, None otherwise.
        """
        with self._lock:
            cached = self._definitions.get(country_code)
            if cached is None:
                fetched = self._source.fetch(country_code)
                cached = fetched if fetched is not None else _MISSING
                self._definitions[country_code] = cached
                logger.debug(
                    "Loaded address format definition for %r (found=%s)",
                    country_code,
                    fetched is not None,
                )

        return None if cached is _MISSING else cached  # type: ignore[return-value]


_default_service: AddressFormatService | None = None
_default_service_lock = threading.Lock()


def get_default_service() -> AddressFormatService:
    """Get the default service instance over the bundled definitions.

    Returns:
        Shared AddressFormatService instance.
    """
    global _default_service
    with _default_service_lock:
        if _default_service is None:
            _default_service = AddressFormatService()
        return _default_service


def get_address_format(country_code: str, locale: str | None = None) -> AddressFormat:
    """Get an address format using the default service.

    Args:
        country_code: Country code to look up.
        locale: Optional locale to translate the format to.

    Returns:
        Fully populated AddressFormat.
    """
    return get_default_service().get(country_code, locale)


def get_all_address_formats(locale: str | None = None) -> dict[str, AddressFormat]:
    """Get every bundled address format using the default service.

    Args:
        locale: Optional locale to translate the formats to.

    Returns:
        Dict mapping country code to AddressFormat.
    """
    return get_default_service().get_all(locale)
