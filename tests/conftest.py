"""Shared pytest fixtures and Hypothesis configuration.

This module provides definition records, sources and services shared
across the test suite, and configures Hypothesis profiles.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Verbosity, settings

from ryandata_address_formats import AddressFormatService, InMemoryDefinitionSource, RawDefinition

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


ZZ_DEFINITION: dict[str, Any] = {
    "format": "{name}\n{address1}\n{city}",
    "required_fields": ["address1", "city"],
    "uppercase_fields": ["city"],
    "administrative_area_type": "province",
    "postal_code_type": "postal",
}

US_DEFINITION: dict[str, Any] = {
    "format": "{name}\n{address1}\n{city}, {state} {zip}",
    "required_fields": ["name", "address1", "city", "state", "zip"],
    "uppercase_fields": ["city", "state"],
    "administrative_area_type": "state",
    "postal_code_type": "zip",
    "postal_code_pattern": "\\d{5}(-\\d{4})?",
}

CA_DEFINITION: dict[str, Any] = {
    "format": "F1",
    "required_fields": ["address1", "city", "province", "postal"],
    "uppercase_fields": ["city", "province", "postal"],
    "administrative_area_type": "province",
    "postal_code_type": "postal",
    "postal_code_prefix": "CA-",
    "translations": {
        "fr": {"format": "F2"},
        "fr-CA": {"format": "F3", "uppercase_fields": ["city"]},
        "en-US": {"postal_code_type": "zip"},
    },
}


class CountingSource:
    """Definition source wrapper that counts fetches per country code."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self.fetches: Counter[str] = Counter()
        self.list_calls = 0

    def list_country_codes(self) -> list[str]:
        self.list_calls += 1
        return list(self.inner.list_country_codes())

    def fetch(self, country_code: str) -> RawDefinition | None:
        self.fetches[country_code] += 1
        return self.inner.fetch(country_code)


def write_definitions(directory: Path, definitions: Mapping[str, Any]) -> Path:
    """Write definitions as <code>.json files into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for code, record in definitions.items():
        path = directory / f"{code}.json"
        if isinstance(record, str):
            path.write_text(record, encoding="utf-8")
        else:
            path.write_text(json.dumps(record), encoding="utf-8")
    return directory


@pytest.fixture
def definitions() -> dict[str, dict[str, Any]]:
    return {"ZZ": ZZ_DEFINITION, "US": US_DEFINITION, "CA": CA_DEFINITION}


@pytest.fixture
def memory_source(definitions: dict[str, dict[str, Any]]) -> InMemoryDefinitionSource:
    return InMemoryDefinitionSource(definitions)


@pytest.fixture
def counting_source(memory_source: InMemoryDefinitionSource) -> CountingSource:
    return CountingSource(memory_source)


@pytest.fixture
def service(counting_source: CountingSource) -> AddressFormatService:
    return AddressFormatService(counting_source)


@pytest.fixture
def definition_dir(tmp_path: Path, definitions: dict[str, dict[str, Any]]) -> Path:
    return write_definitions(tmp_path / "address_format", definitions)
