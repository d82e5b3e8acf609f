"""inspect 커맨드 핸들러: 파일을 쓰지 않고 분류 결과만 출력."""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
from pathlib import Path

from model_generator.cli.options import add_generator_options, add_schema_options, resolve_config
from model_generator.common import TablePlan
from model_generator.pipeline import run_inspect


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("inspect", help="테이블별 컬럼 분류 결과를 출력한다")
    add_schema_options(parser)
    parser.add_argument("--format", choices=["text", "json"], default="text")
    add_generator_options(parser)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    plans = run_inspect(
        schema_path=Path(args.schema),
        config=resolve_config(args),
        source=args.source,
        database=args.database,
        tables=args.tables,
    )

    if args.format == "json":
        print(json.dumps([asdict(plan) for plan in plans], ensure_ascii=False, indent=2))
        return 0

    for plan in plans:
        print(_format_plan(plan))
    return 0


def _format_plan(plan: TablePlan) -> str:
    result = plan.classification
    return (
        f"[{plan.table_name}] class={plan.class_name} path={plan.path_stem} "
        f"pk={result.primary_key or '-'} timestamps={str(result.timestamps).lower()}\n"
        f"  fillable: {', '.join(result.fillable) or '-'}\n"
        f"  guarded: {', '.join(result.guarded) or '-'}"
    )
