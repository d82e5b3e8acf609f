"""information_schema.COLUMNS dump reader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from model_generator.common import ColumnDescriptor, SchemaSnapshot, TableSchema, UserInputError

# MySQL server schemas that never hold application tables
SYSTEM_SCHEMAS = frozenset({"information_schema", "mysql", "performance_schema", "sys"})


def load_schema_dump(path: Path, database: str | None = None) -> SchemaSnapshot:
    """Loads a JSON export of ``information_schema.COLUMNS`` rows.

    Rows are grouped by ``(TABLE_SCHEMA, TABLE_NAME)``. Only one schema is
    read: ``database`` when given, otherwise the single non-system schema in
    the dump.
    """

    if not path.exists():
        raise UserInputError(f"Schema dump not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise UserInputError(f"Schema dump is not valid JSON: {path} ({exc})") from exc

    rows = payload.get("columns", []) if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise UserInputError(f"Schema dump must contain a list of column rows: {path}")

    grouped: dict[tuple[str, str], list[tuple[int, int, ColumnDescriptor]]] = {}
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise UserInputError(f"Schema dump row {index} is not an object: {path}")
        try:
            schema_name = str(_field(row, "TABLE_SCHEMA", "") or "")
            table_name = str(_field(row, "TABLE_NAME"))
            column = _column_from_row(row)
        except KeyError as exc:
            raise UserInputError(f"Schema dump row {index} is missing {exc}: {path}") from exc

        position = int(_field(row, "ORDINAL_POSITION", index))
        grouped.setdefault((schema_name, table_name), []).append((position, index, column))

    selected = _select_schema({schema for schema, _ in grouped}, database, path)

    tables = tuple(
        TableSchema(
            name=table_name,
            columns=tuple(column for _, _, column in sorted(entries, key=lambda e: e[:2])),
        )
        for (schema_name, table_name), entries in grouped.items()
        if schema_name == selected
    )
    return SchemaSnapshot(source=str(path), tables=tables)


def _select_schema(schemas: set[str], database: str | None, path: Path) -> str:
    if database is not None:
        if database not in schemas:
            raise UserInputError(f"Database {database!r} not found in schema dump: {path}")
        return database

    candidates = sorted(schemas - SYSTEM_SCHEMAS)
    if not candidates:
        return ""
    if len(candidates) > 1:
        raise UserInputError(
            f"Schema dump holds several databases ({', '.join(candidates)}); choose one: {path}"
        )
    return candidates[0]


def _column_from_row(row: dict[str, Any]) -> ColumnDescriptor:
    privileges = str(_field(row, "PRIVILEGES", "select,insert,update,references") or "").lower()
    return ColumnDescriptor(
        name=str(_field(row, "COLUMN_NAME")),
        is_primary_key=str(_field(row, "COLUMN_KEY", "") or "").upper() == "PRI",
        extra=str(_field(row, "EXTRA", "") or "").strip(),
        insertable="insert" in privileges,
        updatable="update" in privileges,
    )


_MISSING = object()


def _field(row: dict[str, Any], key: str, default: Any = _MISSING) -> Any:
    """Column names are matched case-insensitively, as MySQL clients differ."""
    if key in row:
        return row[key]
    lowered = key.lower()
    if lowered in row:
        return row[lowered]
    if default is _MISSING:
        raise KeyError(key)
    return default
