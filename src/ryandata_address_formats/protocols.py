from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_address_formats.models import RawDefinition


@runtime_checkable
class DefinitionSourceProtocol(Protocol):
    """Protocol for address format definition sources.

    Implementations map country codes to raw definition records,
    supporting different backends (JSON files, in-memory, database, etc.).
    """

    def list_country_codes(self) -> Sequence[str]:
        """List every country code the source holds a definition for.

        Returns:
            Sequence of country codes, in no particular order.
        """
        ...

    def fetch(self, country_code: str) -> RawDefinition | None:
        """Fetch the raw definition for a country code.

        Args:
            country_code: Country code to look up.

        Returns:
            RawDefinition if found, None if absent or unreadable.

        Raises:
            DataIntegrityError: If a stored record is malformed.
        """
        ...
