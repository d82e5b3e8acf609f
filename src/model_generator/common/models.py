"""Shared data models for the model generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    is_primary_key: bool = False
    extra: str = ""
    insertable: bool = True
    updatable: bool = True


@dataclass(frozen=True)
class TableSchema:
    name: str
    columns: tuple[ColumnDescriptor, ...]


@dataclass(frozen=True)
class SchemaSnapshot:
    source: str
    tables: tuple[TableSchema, ...]

    def table_names(self) -> tuple[str, ...]:
        return tuple(table.name for table in self.tables)


@dataclass(frozen=True)
class ClassificationResult:
    primary_key: str | None
    fillable: tuple[str, ...]
    guarded: tuple[str, ...]
    timestamps: bool


@dataclass(frozen=True)
class TablePlan:
    table_name: str
    class_name: str
    path_stem: str
    classification: ClassificationResult


@dataclass(frozen=True)
class SkippedTable:
    table_name: str
    reason: str


@dataclass
class GenerationOutcome:
    generated_files: tuple[Path, ...] = field(default_factory=tuple)
    skipped: tuple[SkippedTable, ...] = field(default_factory=tuple)

    @property
    def has_partial_failure(self) -> bool:
        return bool(self.skipped)
