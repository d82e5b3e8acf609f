"""Column classification into fillable/guarded model properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Literal, Sequence

from model_generator.common import ClassificationResult, ColumnDescriptor
from model_generator.rules import GeneratorConfig, RuleSet, parse_rule_set, rule_set_matches
from model_generator.rules.models import DEFAULT_RESERVED_COLUMNS

Placement = Literal["guarded", "fillable", "none"]


@dataclass(frozen=True)
class _CompiledRules:
    fillable: RuleSet
    guarded: RuleSet
    timestamps: RuleSet
    reserved_columns: frozenset[str]


def _primary_key(column: ColumnDescriptor, rules: _CompiledRules) -> Placement | None:
    return "guarded" if column.is_primary_key else None


def _restricted(column: ColumnDescriptor, rules: _CompiledRules) -> Placement | None:
    if column.extra or not column.insertable or not column.updatable:
        return "guarded"
    return None


def _fillable_rule(column: ColumnDescriptor, rules: _CompiledRules) -> Placement | None:
    if not rule_set_matches(rules.fillable, column.name):
        return None
    # reserved names are never mass-assignable
    return "guarded" if column.name in rules.reserved_columns else "fillable"


def _guarded_rule(column: ColumnDescriptor, rules: _CompiledRules) -> Placement | None:
    return "guarded" if rule_set_matches(rules.guarded, column.name) else None


# Ordered: the first non-None placement wins.
DECISION_TABLE: tuple[Callable[[ColumnDescriptor, _CompiledRules], Placement | None], ...] = (
    _primary_key,
    _restricted,
    _fillable_rule,
    _guarded_rule,
)


class ColumnClassifier:
    """Classifies table columns using rule sets parsed once at construction."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        config = config or GeneratorConfig()
        self._rules = _CompiledRules(
            fillable=parse_rule_set(config.fillable_rules),
            guarded=parse_rule_set(config.guarded_rules),
            timestamps=parse_rule_set(config.timestamp_rules),
            reserved_columns=frozenset(config.reserved_columns),
        )

    def place(self, column: ColumnDescriptor) -> Placement:
        for decide in DECISION_TABLE:
            placement = decide(column, self._rules)
            if placement is not None:
                return placement
        return "none"

    def classify(self, columns: Sequence[ColumnDescriptor]) -> ClassificationResult:
        primary_key: str | None = None
        fillable: list[str] = []
        guarded: list[str] = []
        timestamps = False

        for column in columns:
            placement = self.place(column)
            if column.is_primary_key:
                primary_key = column.name

            if placement == "guarded":
                guarded.append(column.name)
            elif placement == "fillable":
                fillable.append(column.name)

            if rule_set_matches(self._rules.timestamps, column.name):
                timestamps = True

        guarded_names = _unique(name for name in guarded if name)
        # a repeated column name guarded once is never fillable
        return ClassificationResult(
            primary_key=primary_key,
            fillable=_unique(name for name in fillable if name not in guarded_names),
            guarded=guarded_names,
            timestamps=timestamps,
        )


def classify_columns(
    columns: Sequence[ColumnDescriptor],
    fillable_rules: str,
    guarded_rules: str,
    timestamp_rules: str,
    reserved_columns: Iterable[str] = DEFAULT_RESERVED_COLUMNS,
) -> ClassificationResult:
    """Classifies columns against raw rule texts."""

    config = GeneratorConfig(
        fillable_rules=fillable_rules,
        guarded_rules=guarded_rules,
        timestamp_rules=timestamp_rules,
        reserved_columns=tuple(reserved_columns),
    )
    return ColumnClassifier(config).classify(columns)


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))
