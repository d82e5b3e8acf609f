"""CLI 파서 구성."""

from __future__ import annotations

import argparse

from model_generator import __version__
from model_generator.cli.commands import COMMAND_MODULES


def build_parser() -> argparse.ArgumentParser:
    """메인 ArgumentParser 를 생성한다. 로깅 옵션은 서브커맨드 앞에 둔다."""
    parser = argparse.ArgumentParser(
        prog="model-generator",
        description="기존 DB 스키마로부터 Eloquent 모델 클래스를 생성한다.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-config", required=False, help="logging YAML 설정 경로")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG 로그 출력")
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    for module in COMMAND_MODULES:
        module.configure(subparsers)

    return parser
