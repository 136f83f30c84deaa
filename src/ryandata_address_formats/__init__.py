"""ryandata-address-formats: per-country address format metadata.

This package supplies the structural metadata address validation and
rendering code needs for each country:
- Address template, required and uppercase fields
- Administrative area and postal code classification
- Postal code pattern and prefix
- Locale-specific translations of the above

Quick Start:
    >>> from ryandata_address_formats import AddressFormatService
    >>> service = AddressFormatService()
    >>> us = service.get("US")
    >>> us.required_fields
    ('address_line1', 'locality', 'administrative_area', 'postal_code')

    # Unknown countries resolve to the default "ZZ" format
    >>> service.get("XX").country_code
    'ZZ'

    # Translations, with en_US and en-US treated alike
    >>> service.get("JP", "ja").locale
    'ja'

    # Custom definitions
    >>> service = AddressFormatService(source_type="json", definition_path="/path/to/defs")
"""

from __future__ import annotations

from ryandata_address_formats.core import PluginFactory
from ryandata_address_formats.data import (
    BaseDefinitionSource,
    DefinitionSourceFactory,
    InMemoryDefinitionSource,
    JSONDefinitionSource,
)
from ryandata_address_formats.models import (
    ADDRESS_FIELDS,
    PACKAGE_NAME,
    AddressField,
    AddressFormat,
    AdministrativeAreaType,
    DataIntegrityError,
    DefinitionOverride,
    PostalCodeType,
    RawDefinition,
)
from ryandata_address_formats.protocols import DefinitionSourceProtocol
from ryandata_address_formats.service import (
    DEFAULT_COUNTRY_CODE,
    AddressFormatService,
    get_address_format,
    get_all_address_formats,
    get_default_service,
)
from ryandata_address_formats.translation import apply_translation, normalize_locale

__version__ = "0.1.0"
__package_name__ = "ryandata-address-formats"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressFormatService",
    "DEFAULT_COUNTRY_CODE",
    "get_default_service",
    "get_address_format",
    "get_all_address_formats",
    # Models
    "AddressFormat",
    "RawDefinition",
    "DefinitionOverride",
    "AddressField",
    "ADDRESS_FIELDS",
    "AdministrativeAreaType",
    "PostalCodeType",
    # Errors
    "PACKAGE_NAME",
    "DataIntegrityError",
    # Translation
    "normalize_locale",
    "apply_translation",
    # Protocols
    "DefinitionSourceProtocol",
    # Definition sources
    "BaseDefinitionSource",
    "DefinitionSourceFactory",
    "InMemoryDefinitionSource",
    "JSONDefinitionSource",
    # Factory
    "PluginFactory",
]
