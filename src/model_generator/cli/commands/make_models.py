"""make-models 커맨드 핸들러."""

from __future__ import annotations

import argparse
from pathlib import Path

from model_generator.cli.options import add_generator_options, add_schema_options, resolve_config
from model_generator.pipeline import run_make_models


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("make-models", help="스키마로부터 모델 파일을 생성한다")
    add_schema_options(parser)
    parser.add_argument("--out", required=True, help="모델 파일 출력 루트 (예: app/)")
    parser.add_argument("--stub", required=False, help="모델 stub 파일 경로")
    add_generator_options(parser)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    outcome = run_make_models(
        schema_path=Path(args.schema),
        output_root=Path(args.out),
        config=config,
        source=args.source,
        database=args.database,
        tables=args.tables,
        stub_path=Path(args.stub) if args.stub else None,
    )

    print(f"[OK] generated_models={len(outcome.generated_files)}")
    for path in outcome.generated_files:
        print(f"[OK] model={path}")

    if outcome.has_partial_failure:
        for item in outcome.skipped:
            print(f"[WARN] {config.extends} for {item.table_name} already exists!")
        return 2
    return 0
