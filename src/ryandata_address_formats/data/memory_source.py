from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ryandata_address_formats.data.base import BaseDefinitionSource
from ryandata_address_formats.models import RawDefinition


class InMemoryDefinitionSource(BaseDefinitionSource):
    """Definition source backed by a mapping of country code to record.

    Records are validated up front, so a malformed record fails at
    construction rather than on first lookup.
    """

    def __init__(
        self, definitions: Mapping[str, Mapping[str, Any] | RawDefinition] | None = None
    ) -> None:
        """Initialize in-memory definition source.

        Args:
            definitions: Mapping of country code to raw record (dict or RawDefinition).
        """
        self._definitions: dict[str, RawDefinition] = {
            code: self._to_definition(code, record) for code, record in (definitions or {}).items()
        }

    def _list_country_codes_impl(self) -> list[str]:
        return list(self._definitions)

    def _fetch_impl(self, country_code: str) -> RawDefinition | None:
        return self._definitions.get(country_code)
