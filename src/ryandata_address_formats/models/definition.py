"""Raw definition records.

These models mirror the persisted JSON definition format one-to-one.
Every field is optional at this level: presence is tracked through
``model_fields_set`` so that partial translation records can be merged
key by key, and so that a record read from JSON dumps back unchanged.
Completeness is only enforced when an ``AddressFormat`` is built.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ryandata_address_formats.models.enums import AdministrativeAreaType, PostalCodeType


class DefinitionOverride(BaseModel):
    """Partial definition record, as found under ``translations``."""

    model_config = ConfigDict(extra="forbid")

    format: str | None = Field(
        default=None,
        description="Address template with {field} placeholders, lines separated by newlines",
    )
    required_fields: list[str] | None = Field(
        default=None, description="Field identifiers that must be filled in, in order"
    )
    uppercase_fields: list[str] | None = Field(
        default=None, description="Field identifiers rendered in uppercase"
    )
    administrative_area_type: AdministrativeAreaType | None = None
    postal_code_type: PostalCodeType | None = None
    postal_code_pattern: str | None = Field(
        default=None, description="Regular expression a full postal code must match"
    )
    postal_code_prefix: str | None = Field(
        default=None, description="Prefix prepended to postal codes, e.g. 'SE-'"
    )

    def overrides(self) -> dict[str, Any]:
        """Get the fields explicitly present in this record.

        Returns:
            Dict mapping each set field name to its value.
        """
        return {name: getattr(self, name) for name in self.model_fields_set}


class RawDefinition(DefinitionOverride):
    """Complete definition record for one country, translations included."""

    country_code: str | None = None
    locale: str | None = None
    translations: dict[str, DefinitionOverride] | None = None

    def has(self, field_name: str) -> bool:
        """Check whether a field is present and not null."""
        return field_name in self.model_fields_set and getattr(self, field_name) is not None

    def to_json_dict(self) -> dict[str, Any]:
        """Dump the record in its persisted JSON shape.

        Only fields present in the record are emitted, so a record loaded
        from JSON dumps back to the same object.
        """
        return self.model_dump(mode="json", exclude_unset=True)
