"""Definition sources for address format records.

This module provides the definition source implementations and the
factory used to pick one by name.
"""

from __future__ import annotations

from ryandata_address_formats.data.base import BaseDefinitionSource
from ryandata_address_formats.data.factory import DefinitionSourceFactory
from ryandata_address_formats.data.json_source import (
    JSONDefinitionSource,
    get_default_json_source,
)
from ryandata_address_formats.data.memory_source import InMemoryDefinitionSource

__all__ = [
    "BaseDefinitionSource",
    "DefinitionSourceFactory",
    "InMemoryDefinitionSource",
    "JSONDefinitionSource",
    "get_default_json_source",
]
