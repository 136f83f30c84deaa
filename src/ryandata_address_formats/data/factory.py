from __future__ import annotations

from typing import ClassVar

from ryandata_address_formats.core.factory import PluginFactory
from ryandata_address_formats.protocols import DefinitionSourceProtocol


class DefinitionSourceFactory(PluginFactory[DefinitionSourceProtocol]):
    """Definition sources by name: ``json`` (default) and ``memory``.

    Example:
        >>> DefinitionSourceFactory.create("json", definition_path="/path/to/defs")
        >>> DefinitionSourceFactory.register("sqlite", SQLiteDefinitionSource)
    """

    _builtins: ClassVar[dict[str, str]] = {
        "json": "ryandata_address_formats.data.json_source:JSONDefinitionSource",
        "memory": "ryandata_address_formats.data.memory_source:InMemoryDefinitionSource",
    }
    _default_type: ClassVar[str] = "json"
    _entity_name: ClassVar[str] = "definition source"
