"""AddressFormat value object."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ryandata_address_formats.models.definition import RawDefinition
from ryandata_address_formats.models.enums import AdministrativeAreaType, PostalCodeType
from ryandata_address_formats.models.errors import DataIntegrityError

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")

# Fields copied verbatim from a definition, whether set or not
MANDATORY_FIELDS: tuple[str, ...] = (
    "country_code",
    "format",
    "required_fields",
    "uppercase_fields",
    "administrative_area_type",
    "postal_code_type",
)

# Fields copied only when the definition carries a value for them
OPTIONAL_FIELDS: tuple[str, ...] = ("postal_code_pattern", "postal_code_prefix")


class AddressFormat(BaseModel):
    """Address format metadata for a single country.

    Immutable once constructed. The mandatory fields are always populated;
    a definition that cannot provide them fails construction with a
    DataIntegrityError instead of being filled with defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    country_code: str = Field(min_length=1, description="Country code the format belongs to")
    format: str = Field(min_length=1, description="Address template with {field} placeholders")
    required_fields: tuple[str, ...] = Field(description="Fields that must be filled in")
    uppercase_fields: frozenset[str] = Field(description="Fields rendered in uppercase")
    administrative_area_type: AdministrativeAreaType
    postal_code_type: PostalCodeType
    postal_code_pattern: str | None = None
    postal_code_prefix: str | None = None
    locale: str | None = Field(
        default=None, description="Locale of the applied translation, if any"
    )

    @field_validator("postal_code_pattern")
    @classmethod
    def _check_pattern_compiles(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"postal_code_pattern is not a valid regex: {e}") from e
        return value

    @classmethod
    def from_definition(cls, definition: RawDefinition) -> AddressFormat:
        """Build an AddressFormat from a resolved definition record.

        Args:
            definition: Definition with any translation already applied.

        Returns:
            Fully populated AddressFormat.

        Raises:
            DataIntegrityError: If a mandatory field is missing or invalid.
        """
        data: dict[str, Any] = {name: getattr(definition, name) for name in MANDATORY_FIELDS}
        data["locale"] = definition.locale
        for name in OPTIONAL_FIELDS:
            if definition.has(name):
                data[name] = getattr(definition, name)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DataIntegrityError.from_validation_error(e, definition.country_code) from e

    @property
    def used_fields(self) -> tuple[str, ...]:
        """Field identifiers referenced by the format, in order of appearance."""
        seen: dict[str, None] = {}
        for name in _PLACEHOLDER_RE.findall(self.format):
            seen.setdefault(name, None)
        return tuple(seen)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data = self.model_dump(mode="json")
        data["required_fields"] = list(self.required_fields)
        data["uppercase_fields"] = sorted(self.uppercase_fields)
        return data
