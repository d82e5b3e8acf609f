"""Schema source layer."""

from __future__ import annotations

from pathlib import Path

from model_generator.common import SchemaSnapshot, UserInputError

from .dump import load_schema_dump
from .sqlite_reader import read_sqlite_schema

_SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}

SCHEMA_SOURCES = ("auto", "json", "sqlite")


def load_schema(path: Path, source: str = "auto", database: str | None = None) -> SchemaSnapshot:
    """Loads schema metadata from a JSON dump or SQLite file.

    ``database`` selects the schema of a multi-database dump; SQLite files hold
    a single schema and ignore it.
    """

    normalized = source.strip().lower()
    if normalized == "auto":
        normalized = "sqlite" if path.suffix.lower() in _SQLITE_SUFFIXES else "json"

    if normalized == "json":
        return load_schema_dump(path, database=database)
    if normalized == "sqlite":
        return read_sqlite_schema(path)
    raise UserInputError(f"Unsupported schema source: {source}")


__all__ = ["SCHEMA_SOURCES", "load_schema", "load_schema_dump", "read_sqlite_schema"]
