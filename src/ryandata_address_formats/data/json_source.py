from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Union

from ryandata_address_formats.data.base import BaseDefinitionSource
from ryandata_address_formats.models import DataIntegrityError

logger = logging.getLogger(__name__)

DEFINITION_SUFFIX = ".json"


class JSONDefinitionSource(BaseDefinitionSource):
    """Definition source backed by a directory of ``<countryCode>.json`` files.

    By default, reads the definitions bundled with the package, but can be
    pointed at any directory holding files in the same format.
    """

    def __init__(self, definition_path: Union[str, Path] | None = None) -> None:
        """Initialize JSON definition source.

        Args:
            definition_path: Directory of definition files. If None, uses the
                bundled ``address_format`` definitions.
        """
        self._definition_path = definition_path

    def _get_root(self) -> Traversable:
        """Get the directory holding the definition files."""
        if self._definition_path:
            return Path(self._definition_path)

        return resources.files("ryandata_address_formats.data").joinpath("address_format")

    @property
    def definition_path(self) -> str:
        """Location of the definition files, for diagnostics."""
        return str(self._get_root())

    def _list_country_codes_impl(self) -> list[str]:
        root = self._get_root()
        codes: list[str] = []
        try:
            for entry in root.iterdir():
                if entry.name.startswith(".") or not entry.name.endswith(DEFINITION_SUFFIX):
                    continue
                if entry.is_file():
                    codes.append(entry.name[: -len(DEFINITION_SUFFIX)])
        except OSError as e:
            # An unreadable directory lists no definitions
            logger.warning("Failed to list address format definitions in %s - %s", root, e)
            return []
        return codes

    def _fetch_impl(self, country_code: str) -> Any:
        if not country_code or country_code.startswith(".") or any(
            sep in country_code for sep in ("/", "\\")
        ):
            logger.debug("Rejecting country code that is not a plain file name: %r", country_code)
            return None

        entry = self._get_root().joinpath(f"{country_code}{DEFINITION_SUFFIX}")
        try:
            if not entry.is_file():
                return None
            raw = entry.read_text(encoding="utf-8")
        except OSError as e:
            # Unreadable storage is treated the same as a missing definition
            logger.warning("Failed to read address format definition %s - %s", entry, e)
            return None

        if not raw.strip():
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise DataIntegrityError(e, country_code, {"path": str(entry)}) from e


@lru_cache(maxsize=1)
def get_default_json_source() -> JSONDefinitionSource:
    """Get the default bundled JSON definition source singleton.

    Returns:
        Shared JSONDefinitionSource instance.
    """
    return JSONDefinitionSource()
