"""규칙 설정 모듈."""

from .loader import load_generator_config
from .models import GeneratorConfig, Rule, RuleSet
from .processor import RuleProcessor, parse_rule_set, rule_set_matches

__all__ = [
    "GeneratorConfig",
    "Rule",
    "RuleProcessor",
    "RuleSet",
    "load_generator_config",
    "parse_rule_set",
    "rule_set_matches",
]
