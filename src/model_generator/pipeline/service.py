"""Pipeline orchestration service."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from model_generator.classifier import ColumnClassifier
from model_generator.common import (
    GenerationOutcome,
    ModelExistsError,
    SchemaSnapshot,
    SkippedTable,
    TablePlan,
    TableSchema,
    UserInputError,
)
from model_generator.naming import derive_path_stem, to_class_name
from model_generator.observability import get_logger
from model_generator.renderer import load_stub, render_model
from model_generator.rules import GeneratorConfig
from model_generator.schema import load_schema
from model_generator.storage import write_model

logger = get_logger(__name__)


def plan_table(table: TableSchema, config: GeneratorConfig, classifier: ColumnClassifier) -> TablePlan:
    """Computes the class name, path stem and column classification of a table."""

    class_name = to_class_name(table.name)
    plan = TablePlan(
        table_name=table.name,
        class_name=class_name,
        path_stem=derive_path_stem(config.model_dir, class_name),
        classification=classifier.classify(table.columns),
    )
    logger.debug(
        "classified %s: fillable=%s, guarded=%s, timestamps=%s",
        table.name,
        plan.classification.fillable,
        plan.classification.guarded,
        plan.classification.timestamps,
    )
    return plan


def run_inspect(
    schema_path: Path,
    config: GeneratorConfig,
    source: str = "auto",
    database: str | None = None,
    tables: Iterable[str] | None = None,
) -> tuple[TablePlan, ...]:
    """Loads the schema and returns table plans without writing files."""

    snapshot = _select_tables(load_schema(schema_path, source, database=database), tables)
    classifier = ColumnClassifier(config)
    return tuple(plan_table(table, config, classifier) for table in snapshot.tables)


def run_make_models(
    schema_path: Path,
    output_root: Path,
    config: GeneratorConfig,
    source: str = "auto",
    database: str | None = None,
    tables: Iterable[str] | None = None,
    stub_path: Path | None = None,
) -> GenerationOutcome:
    """Runs schema load -> classify -> render -> write for every table."""

    logger.info("make-models started: schema=%s", schema_path)
    stub = load_stub(stub_path)
    plans = run_inspect(schema_path, config, source=source, database=database, tables=tables)

    generated: list[Path] = []
    skipped: list[SkippedTable] = []
    for plan in plans:
        content = render_model(
            stub,
            table_name=plan.table_name,
            path_stem=plan.path_stem,
            classification=plan.classification,
            config=config,
        )
        try:
            path = write_model(output_root, plan.path_stem, content)
        except ModelExistsError as exc:
            logger.warning("%s for %s already exists: %s", config.extends, plan.table_name, exc.path)
            skipped.append(SkippedTable(table_name=plan.table_name, reason=str(exc)))
            continue

        logger.info("%s for %s created: %s", config.extends, plan.table_name, path)
        generated.append(path)

    logger.info("make-models completed: generated=%d, skipped=%d", len(generated), len(skipped))
    return GenerationOutcome(generated_files=tuple(generated), skipped=tuple(skipped))


def _select_tables(snapshot: SchemaSnapshot, tables: Iterable[str] | None) -> SchemaSnapshot:
    if tables is None:
        return snapshot

    wanted = list(dict.fromkeys(tables))
    if not wanted:
        return snapshot

    missing = [name for name in wanted if name not in snapshot.table_names()]
    if missing:
        raise UserInputError(f"Tables not found in schema: {', '.join(missing)}")

    selected = tuple(table for table in snapshot.tables if table.name in wanted)
    return SchemaSnapshot(source=snapshot.source, tables=selected)
