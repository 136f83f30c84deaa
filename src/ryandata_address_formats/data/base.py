from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ryandata_address_formats.models import DataIntegrityError, RawDefinition


class BaseDefinitionSource(ABC):
    """Abstract base class for address format definition sources.

    Provides record validation and country code stamping, and defines
    the interface all definition source implementations must follow.
    """

    @abstractmethod
    def _list_country_codes_impl(self) -> list[str]:
        """List the country codes available in the underlying storage."""
        ...

    @abstractmethod
    def _fetch_impl(self, country_code: str) -> Mapping[str, Any] | RawDefinition | None:
        """Read the raw record for a country code.

        Args:
            country_code: Country code to read.

        Returns:
            The stored record, or None if absent or unreadable.
        """
        ...

    def _to_definition(
        self, country_code: str, record: Mapping[str, Any] | RawDefinition
    ) -> RawDefinition:
        """Validate a stored record and stamp it with its country code.

        Args:
            country_code: Country code the record is stored under.
            record: Record as read from storage.

        Returns:
            Validated RawDefinition whose country_code is the storage key.

        Raises:
            DataIntegrityError: If the record does not match the definition schema.
        """
        if isinstance(record, RawDefinition):
            return record.model_copy(update={"country_code": country_code})
        if not isinstance(record, Mapping):
            raise DataIntegrityError(
                f"expected a JSON object, got {type(record).__name__}", country_code
            )
        try:
            return RawDefinition.model_validate({**record, "country_code": country_code})
        except ValidationError as e:
            raise DataIntegrityError.from_validation_error(e, country_code) from e

    def list_country_codes(self) -> list[str]:
        """List every country code the source holds a definition for.

        Returns:
            Sorted list of country codes.
        """
        return sorted(self._list_country_codes_impl())

    def fetch(self, country_code: str) -> RawDefinition | None:
        """Fetch the raw definition for a country code.

        Args:
            country_code: Country code to look up.

        Returns:
            RawDefinition if found, None otherwise.

        Raises:
            DataIntegrityError: If the stored record is malformed.
        """
        record = self._fetch_impl(country_code)
        if record is None:
            return None
        return self._to_definition(country_code, record)
