"""컬럼 이름 규칙 파싱 및 평가.

규칙 문법: ``kind:pattern|pattern, kind:pattern``

- ``,`` 로 규칙을 구분하고 ``|`` 로 패턴을 구분한다.
- kind 는 ``starts``, ``ends``, ``equals``, ``contains`` 중 하나.
- 알 수 없는 kind 나 ``:`` 가 없는 조각은 무시한다 (매칭 없음, 예외 없음).
"""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Callable, cast

from .models import RULE_KINDS, Rule, RuleKind, RuleSet

logger = logging.getLogger(__name__)

_MATCHERS: dict[str, Callable[[str, str], bool]] = {
    "starts": lambda candidate, pattern: candidate.startswith(pattern),
    "ends": lambda candidate, pattern: candidate.endswith(pattern),
    "equals": lambda candidate, pattern: candidate == pattern,
    "contains": lambda candidate, pattern: pattern in candidate,
}


@lru_cache(maxsize=256)
def parse_rule_set(rule_text: str) -> RuleSet:
    """규칙 문자열을 RuleSet 으로 파싱한다. 잘못된 조각은 ignored 로 남긴다."""
    rules: list[Rule] = []
    ignored: list[str] = []

    for piece in (rule_text or "").split(","):
        piece = piece.strip()
        if not piece:
            continue

        kind, sep, patterns_text = piece.partition(":")
        kind = kind.strip()
        if not sep or kind not in RULE_KINDS:
            logger.warning("알 수 없는 규칙 무시: %s", piece)
            ignored.append(piece)
            continue

        patterns = tuple(p.strip() for p in patterns_text.split("|") if p.strip())
        if not patterns:
            ignored.append(piece)
            continue

        rules.append(Rule(kind=cast(RuleKind, kind), patterns=patterns))

    return RuleSet(rules=tuple(rules), ignored=tuple(ignored))


def rule_matches(rule: Rule, candidate: str) -> bool:
    matcher = _MATCHERS[rule.kind]
    return any(matcher(candidate, pattern) for pattern in rule.patterns)


def rule_set_matches(rule_set: RuleSet, candidate: str) -> bool:
    return any(rule_matches(rule, candidate) for rule in rule_set.rules)


class RuleProcessor:
    """규칙 문자열 기반 매칭. 파싱 결과는 캐시되므로 상태가 없다."""

    def check(self, rule_text: str, candidate: str) -> bool:
        return rule_set_matches(parse_rule_set(rule_text), candidate)
