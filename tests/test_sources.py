from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from ryandata_address_formats import (
    AddressFormatService,
    DataIntegrityError,
    DefinitionSourceProtocol,
    InMemoryDefinitionSource,
    JSONDefinitionSource,
    RawDefinition,
)
from ryandata_address_formats.data import get_default_json_source
from tests.conftest import CA_DEFINITION, US_DEFINITION, ZZ_DEFINITION, write_definitions


class TestJSONDefinitionSource:
    """Test the directory-backed JSON definition source."""

    def test_satisfies_protocol(self, definition_dir: Path) -> None:
        assert isinstance(JSONDefinitionSource(definition_dir), DefinitionSourceProtocol)

    def test_lists_country_codes(self, definition_dir: Path) -> None:
        (definition_dir / ".hidden.json").write_text("{}", encoding="utf-8")
        (definition_dir / "README.txt").write_text("not a definition", encoding="utf-8")
        (definition_dir / "nested.json").mkdir()

        assert JSONDefinitionSource(definition_dir).list_country_codes() == ["CA", "US", "ZZ"]

    def test_country_code_is_whole_stem(self, tmp_path: Path) -> None:
        """Only the trailing .json is stripped from the file name."""
        write_definitions(tmp_path, {"US.v2": US_DEFINITION})
        source = JSONDefinitionSource(tmp_path)

        assert source.list_country_codes() == ["US.v2"]
        definition = source.fetch("US.v2")
        assert definition is not None
        assert definition.country_code == "US.v2"

    def test_fetch_stamps_country_code(self, definition_dir: Path) -> None:
        definition = JSONDefinitionSource(definition_dir).fetch("US")

        assert isinstance(definition, RawDefinition)
        assert definition.country_code == "US"
        assert definition.format == US_DEFINITION["format"]

    def test_file_name_wins_over_stored_country_code(self, tmp_path: Path) -> None:
        write_definitions(tmp_path, {"US": {**US_DEFINITION, "country_code": "XX"}})

        definition = JSONDefinitionSource(tmp_path).fetch("US")
        assert definition is not None
        assert definition.country_code == "US"

    def test_round_trip(self, definition_dir: Path) -> None:
        """A fetched record dumps back to the stored JSON object."""
        definition = JSONDefinitionSource(definition_dir).fetch("CA")
        stored = json.loads((definition_dir / "CA.json").read_text(encoding="utf-8"))

        assert definition is not None
        assert definition.to_json_dict() == {**stored, "country_code": "CA"}

    def test_missing_directory_lists_nothing(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        source = JSONDefinitionSource(tmp_path / "missing")

        with caplog.at_level(logging.WARNING):
            assert source.list_country_codes() == []
        assert "Failed to list address format definitions" in caplog.text
        assert source.fetch("US") is None

    def test_file_instead_of_directory_lists_nothing(self, tmp_path: Path) -> None:
        not_a_dir = tmp_path / "defs.json"
        not_a_dir.write_text("{}", encoding="utf-8")

        assert JSONDefinitionSource(not_a_dir).list_country_codes() == []

    def test_get_all_over_missing_directory(self, tmp_path: Path) -> None:
        service = AddressFormatService(JSONDefinitionSource(tmp_path / "missing"))

        assert service.get_all() == {}

    def test_fetch_missing(self, definition_dir: Path) -> None:
        assert JSONDefinitionSource(definition_dir).fetch("XX") is None

    @pytest.mark.parametrize("code", ["", ".hidden", "../US", "a/b", "a\\b"])
    def test_fetch_rejects_path_like_codes(self, definition_dir: Path, code: str) -> None:
        assert JSONDefinitionSource(definition_dir).fetch(code) is None

    def test_fetch_empty_file(self, tmp_path: Path) -> None:
        write_definitions(tmp_path, {"US": "  \n"})

        assert JSONDefinitionSource(tmp_path).fetch("US") is None

    def test_unreadable_file_is_treated_as_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        write_definitions(tmp_path, {"US": US_DEFINITION})

        def fail(self: Path, *args: object, **kwargs: object) -> str:
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "read_text", fail)

        with caplog.at_level(logging.WARNING):
            assert JSONDefinitionSource(tmp_path).fetch("US") is None
        assert "Failed to read address format definition" in caplog.text

    def test_invalid_json(self, tmp_path: Path) -> None:
        write_definitions(tmp_path, {"US": "{not json"})

        with pytest.raises(DataIntegrityError) as exc_info:
            JSONDefinitionSource(tmp_path).fetch("US")
        assert exc_info.value.country_code == "US"
        assert exc_info.value.context["path"].endswith("US.json")

    def test_non_object_json(self, tmp_path: Path) -> None:
        write_definitions(tmp_path, {"US": "[1, 2, 3]"})

        with pytest.raises(DataIntegrityError, match="expected a JSON object"):
            JSONDefinitionSource(tmp_path).fetch("US")

    def test_schema_violation(self, tmp_path: Path) -> None:
        write_definitions(tmp_path, {"US": {**US_DEFINITION, "required_fields": "name"}})

        with pytest.raises(DataIntegrityError) as exc_info:
            JSONDefinitionSource(tmp_path).fetch("US")
        assert exc_info.value.errors()

    def test_bundled_definitions(self) -> None:
        source = JSONDefinitionSource()
        codes = source.list_country_codes()

        assert "ZZ" in codes
        assert "US" in codes
        assert all(not code.startswith(".") for code in codes)
        assert source.definition_path.endswith("address_format")

    def test_default_source_is_shared(self) -> None:
        assert get_default_json_source() is get_default_json_source()


class TestInMemoryDefinitionSource:
    """Test the mapping-backed definition source."""

    def test_satisfies_protocol(self, memory_source: InMemoryDefinitionSource) -> None:
        assert isinstance(memory_source, DefinitionSourceProtocol)

    def test_list_and_fetch(self, memory_source: InMemoryDefinitionSource) -> None:
        assert memory_source.list_country_codes() == ["CA", "US", "ZZ"]
        assert memory_source.fetch("XX") is None

        ca = memory_source.fetch("CA")
        assert ca is not None
        assert ca.country_code == "CA"
        assert ca.translations is not None
        assert ca.translations["fr"].format == "F2"

    def test_accepts_raw_definitions(self) -> None:
        source = InMemoryDefinitionSource({"ZZ": RawDefinition.model_validate(ZZ_DEFINITION)})

        definition = source.fetch("ZZ")
        assert definition is not None
        assert definition.country_code == "ZZ"

    def test_validates_up_front(self) -> None:
        with pytest.raises(DataIntegrityError):
            InMemoryDefinitionSource({"CA": {**CA_DEFINITION, "postal_code_type": "zipcode"}})

    def test_empty(self) -> None:
        source = InMemoryDefinitionSource()

        assert source.list_country_codes() == []
        assert source.fetch("ZZ") is None
