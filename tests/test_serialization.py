"""
Tests for serialization and loading of dialect configuration.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `simplecsv.serialization`.
"""

import pytest
from simplecsv.errors import DialectError
from simplecsv.model import Dialect, EmptyLinePolicy, NewlineType, ReaderOptions, WriterOptions
from simplecsv.serialization import (
    dialect_from_dict,
    dialect_from_json,
    dialect_from_yaml,
    dialect_to_dict,
    dialect_to_json,
    dialect_to_yaml,
    load_dialect,
)


def build_sample_dialect() -> Dialect:
    return Dialect(
        name="pipes",
        reader=ReaderOptions(
            delimiter="|",
            enclosure="'",
            terminator="\n",
            encoding="latin-1",
            empty_lines=EmptyLinePolicy.NO_FIELDS,
        ),
        writer=WriterOptions(delimiter="|", enclosure="'", newline=NewlineType.WINDOWS, trailing_terminator=True),
    )


def test_json_roundtrip():
    dialect = build_sample_dialect()
    restored = dialect_from_json(dialect_to_json(dialect))
    assert restored == dialect


def test_yaml_roundtrip():
    dialect = build_sample_dialect()
    before = dialect_to_dict(dialect)
    restored = dialect_from_yaml(dialect_to_yaml(dialect))
    assert dialect_to_dict(restored) == before
    assert restored == dialect


def test_custom_newline_roundtrip():
    dialect = Dialect(writer=WriterOptions(newline="<EOR>"))
    assert dialect_from_json(dialect_to_json(dialect)).writer.terminator == "<EOR>"


def test_named_newline_serializes_by_name():
    d = dialect_to_dict(Dialect(writer=WriterOptions(newline=NewlineType.WINDOWS)))
    assert d["writer"]["newline"] == {"style": "windows"}


def test_custom_newline_spelled_like_a_style_name():
    for newline in ("unix", "Windows"):
        dialect = Dialect(writer=WriterOptions(newline=newline))
        restored = dialect_from_yaml(dialect_to_yaml(dialect))
        assert restored.writer.newline == newline
        assert restored.writer.terminator == newline


def test_unknown_newline_style():
    with pytest.raises(ValueError):
        dialect_from_dict({"writer": {"newline": {"style": "mac"}}})


def test_missing_keys_take_defaults():
    dialect = dialect_from_dict({"reader": {"delimiter": ";"}})
    assert dialect.name == "default"
    assert dialect.reader == ReaderOptions(delimiter=";")
    assert dialect.writer == WriterOptions()


def test_unknown_empty_line_policy():
    with pytest.raises(ValueError):
        dialect_from_dict({"reader": {"empty_lines": "sometimes"}})


class TestLoadDialect:
    """Test loading dialect files from disk."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "semicolons.yaml"
        path.write_text("reader:\n  delimiter: ';'\nwriter:\n  delimiter: ';'\n  newline: {style: windows}\n")
        dialect = load_dialect(str(path))
        assert dialect.name == "semicolons"
        assert dialect.reader.delimiter == ";"
        assert dialect.writer.terminator == "\r\n"

    def test_load_json(self, tmp_path):
        path = tmp_path / "tabs.json"
        path.write_text(dialect_to_json(Dialect(name="tsv", reader=ReaderOptions(delimiter="\t"))))
        dialect = load_dialect(str(path))
        assert dialect.name == "tsv"
        assert dialect.reader.delimiter == "\t"

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "dialect.toml"
        path.write_text("")
        with pytest.raises(DialectError):
            load_dialect(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dialect(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("reader: [unclosed\n")
        with pytest.raises(DialectError):
            load_dialect(str(path))

    def test_non_mapping_content(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(DialectError):
            load_dialect(str(path))

    def test_invalid_option_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("reader:\n  delimiter: ';;'\n")
        with pytest.raises(DialectError):
            load_dialect(str(path))

    def test_chunk_size_given_as_string(self, tmp_path):
        path = tmp_path / "small.yaml"
        path.write_text("reader:\n  chunk_size: '10'\n")
        assert load_dialect(str(path)).reader.chunk_size == 10

    @pytest.mark.parametrize("value", ["ten", "null", "[1]"])
    def test_invalid_chunk_size(self, tmp_path, value):
        path = tmp_path / "bad_chunk.yaml"
        path.write_text(f"reader:\n  chunk_size: {value}\n")
        with pytest.raises(DialectError):
            load_dialect(str(path))
