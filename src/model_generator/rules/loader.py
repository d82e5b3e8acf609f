"""YAML 기반 생성기 설정 로딩."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import DEFAULT_RESERVED_COLUMNS, GeneratorConfig

logger = logging.getLogger(__name__)

_DEFAULT_GENERATOR_CONFIG = GeneratorConfig()


def load_generator_config(config_path: Path) -> GeneratorConfig:
    """generator/models.yaml 로딩. 실패 시 기본값 반환."""
    data = _safe_load_yaml(config_path)
    if data is None:
        return _DEFAULT_GENERATOR_CONFIG

    try:
        generator: dict[str, Any] = data.get("generator") or {}
        rules_raw: dict[str, Any] = generator.get("rules") or {}
        defaults = _DEFAULT_GENERATOR_CONFIG

        return GeneratorConfig(
            model_dir=_text(generator.get("dir"), defaults.model_dir),
            extends=_text(generator.get("extends"), defaults.extends),
            root_namespace=_text(generator.get("namespace"), defaults.root_namespace),
            fillable_rules=_rule_text(rules_raw.get("fillable", defaults.fillable_rules)),
            guarded_rules=_rule_text(rules_raw.get("guarded", defaults.guarded_rules)),
            timestamp_rules=_rule_text(rules_raw.get("timestamps", defaults.timestamp_rules)),
            reserved_columns=_reserved_columns(generator.get("reserved_columns")),
        )
    except Exception:
        logger.warning("generator 설정 파싱 실패, 기본값 사용: %s", config_path)
        return _DEFAULT_GENERATOR_CONFIG


def _text(value: Any, default: str) -> str:
    """비어 있는 키는 기본값을 사용한다."""
    return default if value is None else str(value)


def _reserved_columns(value: Any) -> tuple[str, ...]:
    """단일 문자열도 한 개짜리 목록으로 취급한다."""
    if value is None:
        return DEFAULT_RESERVED_COLUMNS
    if isinstance(value, (list, tuple)):
        return tuple(str(c) for c in value)
    return (str(value),)


def _rule_text(value: Any) -> str:
    """규칙은 문자열 또는 문자열 목록으로 적을 수 있다."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """YAML 파일을 안전하게 로딩. 실패 시 None 반환."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except Exception:
        logger.warning("YAML 로딩 실패: %s", path)
        return None
