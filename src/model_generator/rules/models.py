"""규칙 및 생성기 설정 모델."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

RuleKind = Literal["starts", "ends", "equals", "contains"]

RULE_KINDS: frozenset[str] = frozenset(get_args(RuleKind))

DEFAULT_GUARDED_RULES = "ends:ID|_id|_ID|ids|IDs, equals:id|ID|ts"
DEFAULT_TIMESTAMP_RULES = "equals:created_at|updated_at"
DEFAULT_RESERVED_COLUMNS = ("id", "created_at", "updated_at", "deleted_at")


@dataclass(frozen=True)
class Rule:
    """단일 규칙. 패턴 중 하나라도 맞으면 매칭."""

    kind: RuleKind
    patterns: tuple[str, ...]


@dataclass(frozen=True)
class RuleSet:
    """파싱된 규칙 집합. 규칙 중 하나라도 맞으면 매칭."""

    rules: tuple[Rule, ...] = ()
    ignored: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.rules)


@dataclass(frozen=True)
class GeneratorConfig:
    """모델 생성 설정 (generator/models.yaml + CLI 옵션)."""

    model_dir: str = "Models/"
    extends: str = "Model"
    root_namespace: str = "App"
    fillable_rules: str = ""
    guarded_rules: str = DEFAULT_GUARDED_RULES
    timestamp_rules: str = DEFAULT_TIMESTAMP_RULES
    reserved_columns: tuple[str, ...] = DEFAULT_RESERVED_COLUMNS
