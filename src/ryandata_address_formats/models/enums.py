"""Address format enumerations."""

from __future__ import annotations

from enum import Enum


class AddressField(str, Enum):
    """Canonical field identifiers used by the bundled definitions."""

    RECIPIENT = "recipient"
    ORGANIZATION = "organization"
    ADDRESS_LINE1 = "address_line1"
    ADDRESS_LINE2 = "address_line2"
    DEPENDENT_LOCALITY = "dependent_locality"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    SORTING_CODE = "sorting_code"


class AdministrativeAreaType(str, Enum):
    """How a country labels its top-level administrative area."""

    AREA = "area"
    COUNTY = "county"
    DEPARTMENT = "department"
    DISTRICT = "district"
    DO_SI = "do_si"
    EMIRATE = "emirate"
    ISLAND = "island"
    OBLAST = "oblast"
    PARISH = "parish"
    PREFECTURE = "prefecture"
    PROVINCE = "province"
    STATE = "state"


class PostalCodeType(str, Enum):
    """How a country labels its postal code."""

    POSTAL = "postal"
    ZIP = "zip"
    PIN = "pin"


# All field identifiers as a list
ADDRESS_FIELDS: list[str] = [f.value for f in AddressField]
