"""generator 설정 로딩 테스트."""

from __future__ import annotations

from pathlib import Path

from model_generator.rules import GeneratorConfig, RuleProcessor, load_generator_config
from model_generator.rules.models import DEFAULT_GUARDED_RULES, DEFAULT_TIMESTAMP_RULES


CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"


def test_load_generator_config_from_yaml() -> None:
    """실제 models.yaml 로딩 성공."""
    config = load_generator_config(CONFIGS_DIR / "generator" / "models.yaml")
    assert isinstance(config, GeneratorConfig)
    assert config.model_dir == "Models/"
    assert config.extends == "Model"
    assert config.root_namespace == "App"
    assert config.fillable_rules == ""
    assert config.timestamp_rules == DEFAULT_TIMESTAMP_RULES
    assert config.reserved_columns == ("id", "created_at", "updated_at", "deleted_at")


def test_guarded_rule_list_is_joined_into_rule_text() -> None:
    """목록 형태 규칙은 쉼표로 결합된다."""
    config = load_generator_config(CONFIGS_DIR / "generator" / "models.yaml")
    processor = RuleProcessor()
    assert config.guarded_rules == "ends:ID|_id|_ID|ids|IDs, equals:id|ID|ts"
    assert processor.check(config.guarded_rules, "team_id") is True


def test_load_generator_config_missing_file_returns_default() -> None:
    """파일 없을 때 기본값 반환."""
    config = load_generator_config(Path("/nonexistent/models.yaml"))
    assert config == GeneratorConfig()
    assert config.guarded_rules == DEFAULT_GUARDED_RULES


def test_load_generator_config_partial_file_keeps_defaults(tmp_path: Path) -> None:
    """일부 키만 있으면 나머지는 기본값."""
    config_path = tmp_path / "models.yaml"
    config_path.write_text(
        "generator:\n  extends: BaseModel\n  rules:\n    fillable: 'contains:name'\n",
        encoding="utf-8",
    )
    config = load_generator_config(config_path)
    assert config.extends == "BaseModel"
    assert config.fillable_rules == "contains:name"
    assert config.model_dir == "Models/"
    assert config.guarded_rules == DEFAULT_GUARDED_RULES


def test_load_generator_config_invalid_structure_returns_default(tmp_path: Path) -> None:
    """구조가 잘못되면 기본값 반환."""
    config_path = tmp_path / "models.yaml"
    config_path.write_text("generator: [1, 2, 3]\n", encoding="utf-8")
    assert load_generator_config(config_path) == GeneratorConfig()


def test_empty_rules_section_keeps_other_settings(tmp_path: Path) -> None:
    """값이 빈 rules 키가 있어도 나머지 설정은 유지된다."""
    config_path = tmp_path / "models.yaml"
    config_path.write_text(
        "generator:\n  dir: Entities/\n  extends: BaseModel\n  namespace: Shop\n  rules:\n",
        encoding="utf-8",
    )
    config = load_generator_config(config_path)
    assert config.model_dir == "Entities/"
    assert config.extends == "BaseModel"
    assert config.root_namespace == "Shop"
    assert config.guarded_rules == DEFAULT_GUARDED_RULES


def test_empty_generator_section_returns_defaults(tmp_path: Path) -> None:
    """generator 키만 있고 값이 없으면 기본값."""
    config_path = tmp_path / "models.yaml"
    config_path.write_text("generator:\n", encoding="utf-8")
    assert load_generator_config(config_path) == GeneratorConfig()


def test_scalar_reserved_columns_is_single_name(tmp_path: Path) -> None:
    """reserved_columns 단일 문자열은 한 개짜리 목록."""
    config_path = tmp_path / "models.yaml"
    config_path.write_text("generator:\n  reserved_columns: id\n", encoding="utf-8")
    config = load_generator_config(config_path)
    assert config.reserved_columns == ("id",)
