"""Bulk export of address formats.

Flattens the output of ``AddressFormatService.get_all`` into records or a
pandas DataFrame, e.g. for loading into another storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ryandata_address_formats.models import AddressFormat

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_address_formats.service import AddressFormatService

# Column order of exported rows
EXPORT_COLUMNS: list[str] = [
    "country_code",
    "locale",
    "format",
    "required_fields",
    "uppercase_fields",
    "administrative_area_type",
    "postal_code_type",
    "postal_code_pattern",
    "postal_code_prefix",
]

LIST_SEPARATOR = ","


def format_to_record(address_format: AddressFormat) -> dict[str, Any]:
    """Flatten an AddressFormat into a single export row.

    List fields are joined with commas so the row fits flat formats like CSV.
    """
    data = address_format.to_dict()
    data["required_fields"] = LIST_SEPARATOR.join(data["required_fields"])
    data["uppercase_fields"] = LIST_SEPARATOR.join(data["uppercase_fields"])
    return {column: data[column] for column in EXPORT_COLUMNS}


def formats_to_records(formats: Mapping[str, AddressFormat]) -> list[dict[str, Any]]:
    """Flatten a mapping of address formats into export rows, sorted by code."""
    return [format_to_record(formats[code]) for code in sorted(formats)]


def formats_to_dataframe(formats: Mapping[str, AddressFormat]) -> pd.DataFrame:
    """Convert a mapping of address formats into a DataFrame.

    Args:
        formats: Mapping of country code to AddressFormat, as returned by
            ``AddressFormatService.get_all``.

    Returns:
        DataFrame with one row per country, indexed by country_code.
    """
    import pandas as pd

    df = pd.DataFrame(formats_to_records(formats), columns=EXPORT_COLUMNS)
    return df.set_index("country_code")


def export_dataframe(
    service: AddressFormatService | None = None,
    locale: str | None = None,
) -> pd.DataFrame:
    """Export every address format known to a service as a DataFrame.

    Args:
        service: Service to export from. Defaults to the default service.
        locale: Optional locale to translate the formats to.

    Returns:
        DataFrame with one row per country, indexed by country_code.
    """
    if service is None:
        from ryandata_address_formats.service import get_default_service

        service = get_default_service()
    return formats_to_dataframe(service.get_all(locale))
