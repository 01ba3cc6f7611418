"""
Serialization helpers for simplecsv configuration (options and dialects).

Provides lossless JSON/YAML round-trip via intermediate dict representation,
plus loading a dialect from a configuration file.
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict

import yaml

from simplecsv.errors import DialectError
from simplecsv.model import (
    DEFAULT_CHUNK_SIZE,
    Dialect,
    EmptyLinePolicy,
    NewlineType,
    ReaderOptions,
    WriterOptions,
)


def reader_options_to_dict(o: ReaderOptions) -> Dict[str, Any]:
    return {
        "delimiter": o.delimiter,
        "enclosure": o.enclosure,
        "terminator": o.terminator,
        "encoding": o.encoding,
        "empty_lines": o.empty_lines.value,
        "chunk_size": o.chunk_size,
    }


def reader_options_from_dict(d: Dict[str, Any] | None) -> ReaderOptions:
    if d is None:
        return ReaderOptions()
    return ReaderOptions(
        delimiter=d.get("delimiter", ","),
        enclosure=d.get("enclosure", '"'),
        terminator=d.get("terminator", "\n"),
        encoding=d.get("encoding", "utf-8"),
        empty_lines=EmptyLinePolicy(d.get("empty_lines", EmptyLinePolicy.EMPTY_FIELD.value)),
        chunk_size=int(d.get("chunk_size", DEFAULT_CHUNK_SIZE)),
    )


def newline_to_value(newline: NewlineType | str) -> Any:
    # Named styles serialize as {"style": name}, custom terminators as plain strings.
    if isinstance(newline, NewlineType):
        return {"style": newline.name.lower()}
    return newline


def newline_from_value(value: Any) -> NewlineType | str:
    if not isinstance(value, dict):
        return value
    style = str(value.get("style", ""))
    try:
        return NewlineType[style.upper()]
    except KeyError:
        raise ValueError(f"Unknown newline style: {style!r}")


def writer_options_to_dict(o: WriterOptions) -> Dict[str, Any]:
    return {
        "delimiter": o.delimiter,
        "enclosure": o.enclosure,
        "newline": newline_to_value(o.newline),
        "encoding": o.encoding,
        "trailing_terminator": o.trailing_terminator,
    }


def writer_options_from_dict(d: Dict[str, Any] | None) -> WriterOptions:
    if d is None:
        return WriterOptions()
    return WriterOptions(
        delimiter=d.get("delimiter", ","),
        enclosure=d.get("enclosure", '"'),
        newline=newline_from_value(d.get("newline", {"style": "unix"})),
        encoding=d.get("encoding", "utf-8"),
        trailing_terminator=bool(d.get("trailing_terminator", False)),
    )


def dialect_to_dict(dialect: Dialect) -> Dict[str, Any]:
    return {
        "name": dialect.name,
        "reader": reader_options_to_dict(dialect.reader),
        "writer": writer_options_to_dict(dialect.writer),
    }


def dialect_from_dict(d: Dict[str, Any]) -> Dialect:
    return Dialect(
        name=d.get("name", "default"),
        reader=reader_options_from_dict(d.get("reader")),
        writer=writer_options_from_dict(d.get("writer")),
    )


def dialect_to_json(dialect: Dialect) -> str:
    return json.dumps(dialect_to_dict(dialect), sort_keys=True)


def dialect_from_json(s: str) -> Dialect:
    d = json.loads(s)
    return dialect_from_dict(d)


def dialect_to_yaml(dialect: Dialect) -> str:
    return yaml.safe_dump(dialect_to_dict(dialect))


def dialect_from_yaml(s: str) -> Dialect:
    d = yaml.safe_load(s)
    return dialect_from_dict(d)


def load_dialect(filepath: str) -> Dialect:
    """
    Load a dialect from a .json, .yaml or .yml file.

    Args:
        filepath: Path to the dialect file

    Returns:
        Dialect object (named after the file when it has no name key)

    Raises:
        FileNotFoundError: If file doesn't exist
        DialectError: If the file type is unsupported or its content is invalid
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in (".json", ".yaml", ".yml"):
        raise DialectError(f"Unsupported dialect file type: {ext or filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Dialect file not found: {filepath}")

    try:
        d = json.loads(content) if ext == ".json" else yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DialectError(f"Failed to parse dialect file {filepath}: {e}") from e

    if not isinstance(d, dict):
        raise DialectError(f"Dialect file {filepath} must contain a mapping")

    d.setdefault("name", os.path.splitext(os.path.basename(filepath))[0])
    try:
        return dialect_from_dict(d)
    except (ValueError, TypeError) as e:
        raise DialectError(f"Invalid dialect in {filepath}: {e}") from e
