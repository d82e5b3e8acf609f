"""로깅 설정."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

PACKAGE_LOGGER = "model_generator"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config_path: Path | None = None, verbose: bool = False) -> None:
    """로깅 초기화.

    config_path YAML(dictConfig) 로딩 실패 시 basicConfig 로 대체한다.
    verbose 이면 패키지 로거를 DEBUG 로 낮춰 규칙 파싱/분류 로그까지 출력한다.
    """
    if not _apply_yaml_config(config_path):
        logging.basicConfig(level=logging.INFO, format=DEFAULT_FORMAT)

    if verbose:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


def _apply_yaml_config(config_path: Path | None) -> bool:
    if config_path is None:
        return False
    try:
        with open(config_path, encoding="utf-8") as f:
            config: dict[str, Any] = yaml.safe_load(f)
        logging.config.dictConfig(config)
    except Exception:
        logging.getLogger(__name__).debug("로깅 설정 로딩 실패: %s", config_path)
        return False
    return True


def get_logger(name: str) -> logging.Logger:
    """표준 로거 반환."""
    return logging.getLogger(name)
