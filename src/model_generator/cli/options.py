"""커맨드 공통 옵션 및 설정 해석."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from model_generator.rules import GeneratorConfig, load_generator_config
from model_generator.schema import SCHEMA_SOURCES

_OVERRIDES = {
    "dir": "model_dir",
    "extends": "extends",
    "namespace": "root_namespace",
    "fillable": "fillable_rules",
    "guarded": "guarded_rules",
    "timestamps": "timestamp_rules",
}


def add_schema_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--schema", required=True, help="information_schema JSON dump 또는 SQLite 파일")
    parser.add_argument("--source", choices=SCHEMA_SOURCES, default="auto")
    parser.add_argument("--database", required=False, help="dump 에 여러 DB 가 있을 때 대상 TABLE_SCHEMA")
    parser.add_argument("--table", action="append", dest="tables", help="대상 테이블 (반복 가능)")


def add_generator_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", required=False, help="generator YAML 설정 경로")
    parser.add_argument("--dir", required=False, help="모델 디렉터리 (기본 Models/)")
    parser.add_argument("--extends", required=False, help="부모 클래스 (기본 Model)")
    parser.add_argument("--namespace", required=False, help="루트 네임스페이스 (기본 App)")
    parser.add_argument("--fillable", required=False, help="$fillable 컬럼 규칙")
    parser.add_argument("--guarded", required=False, help="$guarded 컬럼 규칙")
    parser.add_argument("--timestamps", required=False, help="$timestamps 판정 컬럼 규칙")


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """YAML 설정 위에 CLI 옵션을 덮어쓴다."""
    config = GeneratorConfig()
    if args.config:
        config = load_generator_config(Path(args.config))

    overrides = {
        field: getattr(args, option)
        for option, field in _OVERRIDES.items()
        if getattr(args, option, None) is not None
    }
    return replace(config, **overrides)
