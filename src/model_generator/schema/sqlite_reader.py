"""SQLite schema reader."""

from __future__ import annotations

from pathlib import Path
import re
import sqlite3

from model_generator.common import ColumnDescriptor, SchemaSnapshot, TableSchema, UserInputError

# PRAGMA table_xinfo "hidden" values for generated columns
_GENERATED_EXTRA = {2: "VIRTUAL GENERATED", 3: "STORED GENERATED"}

_AUTOINCREMENT_PATTERN = re.compile(r"\bAUTOINCREMENT\b", re.IGNORECASE)


def read_sqlite_schema(db_path: Path) -> SchemaSnapshot:
    """Reads user tables and their columns from a SQLite database file."""

    if not db_path.exists():
        raise UserInputError(f"DB file not found: {db_path}")

    try:
        with sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True) as conn:
            conn.row_factory = sqlite3.Row
            table_rows = conn.execute(
                """
                SELECT name, sql
                FROM sqlite_master
                WHERE type = 'table'
                  AND name NOT LIKE 'sqlite_%'
                """
            ).fetchall()

            tables = tuple(
                TableSchema(
                    name=row["name"],
                    columns=_read_columns(conn, row["name"], row["sql"] or ""),
                )
                for row in table_rows
            )
    except sqlite3.DatabaseError as exc:
        raise UserInputError(f"Cannot read SQLite schema: {db_path} ({exc})") from exc

    return SchemaSnapshot(source=str(db_path), tables=tables)


def _read_columns(conn: sqlite3.Connection, table_name: str, create_sql: str) -> tuple[ColumnDescriptor, ...]:
    rows = conn.execute(f"PRAGMA table_xinfo({_quote_identifier(table_name)})").fetchall()
    autoincrement = bool(_AUTOINCREMENT_PATTERN.search(create_sql))

    columns: list[ColumnDescriptor] = []
    for row in rows:
        hidden = int(row["hidden"])
        if hidden == 1:
            # virtual table hidden column
            continue

        is_primary_key = int(row["pk"]) > 0
        extra = _GENERATED_EXTRA.get(hidden, "")
        if is_primary_key and autoincrement:
            extra = "auto_increment"

        columns.append(
            ColumnDescriptor(
                name=row["name"],
                is_primary_key=is_primary_key,
                extra=extra,
            )
        )
    return tuple(columns)


def _quote_identifier(name: str) -> str:
    escaped = name.replace('"', '""')
    return f'"{escaped}"'
