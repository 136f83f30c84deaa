"""Address format models package.

Contains the raw definition records, the AddressFormat value object,
the enumerations they use, and the package's error types.
"""

from __future__ import annotations

from ryandata_address_formats.models.address_format import (
    MANDATORY_FIELDS,
    OPTIONAL_FIELDS,
    AddressFormat,
)
from ryandata_address_formats.models.definition import DefinitionOverride, RawDefinition
from ryandata_address_formats.models.enums import (
    ADDRESS_FIELDS,
    AddressField,
    AdministrativeAreaType,
    PostalCodeType,
)
from ryandata_address_formats.models.errors import PACKAGE_NAME, DataIntegrityError

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "DataIntegrityError",
    # Enums and constants
    "AddressField",
    "ADDRESS_FIELDS",
    "AdministrativeAreaType",
    "PostalCodeType",
    "MANDATORY_FIELDS",
    "OPTIONAL_FIELDS",
    # Records
    "DefinitionOverride",
    "RawDefinition",
    "AddressFormat",
]
