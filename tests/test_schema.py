"""Tests for field schema loading."""

import pytest
from conftest import CATALOG, FakeBackend

from mediashim.models import FieldSchema, StreamKind
from mediashim.schema import load_schema, parse_catalog


def test_parse_catalog_sections():
    """Test one section per stream kind header."""
    schema = parse_catalog(CATALOG)

    assert set(schema.sections) == set(StreamKind)
    assert StreamKind.GENERAL in schema
    assert list(schema.fields(StreamKind.AUDIO)) == [
        "ID",
        "Format",
        "Language",
        "BitRate",
        "SamplingRate",
    ]


def test_parse_catalog_keeps_order_and_descriptions():
    """Test fields keep catalog order and descriptions."""
    schema = parse_catalog(CATALOG)
    general = schema.fields(StreamKind.GENERAL)

    assert list(general)[:3] == ["Count", "StreamKind", "Format"]
    assert general["FileSize"] == "File size in bytes"
    assert "Duration/String" in general


def test_parse_catalog_drops_deprecated():
    """Test deprecated entries are excluded."""
    schema = parse_catalog(CATALOG)
    assert "Encoded_Library" not in schema.fields(StreamKind.GENERAL)


def test_parse_catalog_commits_last_section():
    """Test the final section is kept without a trailing sentinel."""
    schema = parse_catalog("Menu\nFormat;Format used")
    assert dict(schema.fields(StreamKind.MENU)) == {"Format": "Format used"}


def test_parse_catalog_empty_sections():
    """Test headers without fields still produce a section."""
    schema = parse_catalog(CATALOG)
    assert dict(schema.fields(StreamKind.OTHER)) == {}
    assert StreamKind.OTHER in schema


def test_parse_catalog_crlf_and_blank_lines():
    """Test CRLF endings and blank lines are tolerated."""
    schema = parse_catalog("\r\nVideo\r\nWidth;Width in pixel\r\n\r\nHeight;\r\n")
    assert dict(schema.fields(StreamKind.VIDEO)) == {"Width": "Width in pixel", "Height": ""}


def test_parse_catalog_extra_columns():
    """Test only the first two columns are used."""
    schema = parse_catalog("Audio\nFormat;Format used;N NT")
    assert schema.fields(StreamKind.AUDIO)["Format"] == "Format used"


def test_parse_catalog_unknown_section_and_orphans():
    """Test entries outside known sections are ignored."""
    schema = parse_catalog("Orphan;before any section\nChapters\nFoo;bar\nText\nFormat;x")
    assert set(schema.sections) == {StreamKind.TEXT}
    assert len(schema) == 1


def test_parse_catalog_deprecated_marker_case():
    """Test the deprecated marker is matched regardless of case."""
    schema = parse_catalog("General\nOld;DEPRECATED field\nNew;kept")
    assert list(schema.fields(StreamKind.GENERAL)) == ["New"]


def test_fields_for_missing_kind():
    """Test a kind absent from the catalog has no fields."""
    schema = FieldSchema()
    assert dict(schema.fields(StreamKind.VIDEO)) == {}
    assert len(schema) == 0


def test_load_schema_queries_catalog_once():
    """Test the catalog option is queried once."""
    backend = FakeBackend()
    schema = load_schema(backend)

    assert backend.catalog_queries == 1
    assert len(schema) == len(parse_catalog(CATALOG))


def test_fields_are_read_only():
    """Test callers cannot edit a loaded schema."""
    schema = parse_catalog(CATALOG)
    fields = schema.fields(StreamKind.VIDEO)

    with pytest.raises(TypeError):
        fields["Injected"] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        schema.fields(StreamKind.OTHER)["Injected"] = "x"  # type: ignore[index]
    assert "Injected" not in schema.fields(StreamKind.VIDEO)
