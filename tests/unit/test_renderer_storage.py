from __future__ import annotations

from pathlib import Path

import pytest

from model_generator.common import ClassificationResult, ModelExistsError, UserInputError
from model_generator.renderer import load_stub, model_namespace, render_model, split_path_stem
from model_generator.rules import GeneratorConfig
from model_generator.storage import model_path, write_model


def _result(primary_key: str | None = "id", timestamps: bool = True) -> ClassificationResult:
    return ClassificationResult(
        primary_key=primary_key,
        fillable=("email", "name"),
        guarded=("id", "team_id"),
        timestamps=timestamps,
    )


def test_split_path_stem() -> None:
    assert split_path_stem("Models/Admin/User") == (("Models", "Admin"), "User")
    assert split_path_stem("User") == ((), "User")
    assert split_path_stem("") == ((), "")


def test_model_namespace() -> None:
    assert model_namespace("App", "Models/User") == "App\\Models"
    assert model_namespace("App\\", "User") == "App"
    assert model_namespace("", "Models/User") == "Models"


def test_render_model_substitutes_properties() -> None:
    rendered = render_model(
        load_stub(),
        table_name="users",
        path_stem="Models/User",
        classification=_result(),
        config=GeneratorConfig(),
    )

    assert "<?php namespace App\\Models;" in rendered
    assert "class User extends Model" in rendered
    assert "protected $table = 'users';" in rendered
    assert "protected $fillable = ['email', 'name'];" in rendered
    assert "protected $guarded = ['id', 'team_id'];" in rendered
    assert "public $timestamps = true;" in rendered
    assert "$primaryKey" not in rendered
    assert "{{" not in rendered


def test_render_model_custom_primary_key_and_matching_table_name() -> None:
    rendered = render_model(
        "class {{class}} extends {{extends}}\n{\n    {{tablename}}\n    {{primaryKey}}\n    {{timestamps}}\n}\n",
        table_name="Address",
        path_stem="Models/Address",
        classification=_result(primary_key="address_code", timestamps=False),
        config=GeneratorConfig(extends="BaseModel"),
    )

    assert rendered == (
        "class Address extends BaseModel\n"
        "{\n"
        "    protected $primaryKey = 'address_code';\n"
        "    public $timestamps = false;\n"
        "}\n"
    )


def test_render_model_without_primary_key() -> None:
    rendered = render_model(
        "{{primaryKey}}|{{guarded}}",
        table_name="logs",
        path_stem="Log",
        classification=ClassificationResult(None, (), (), False),
        config=GeneratorConfig(),
    )
    assert rendered == "|protected $guarded = [];\n"


def test_load_stub_missing_file(tmp_path: Path) -> None:
    with pytest.raises(UserInputError):
        load_stub(tmp_path / "missing.stub")


def test_write_model_creates_directories(tmp_path: Path) -> None:
    path = write_model(tmp_path / "app", "Models/User", "<?php\n")

    assert path == tmp_path / "app" / "Models" / "User.php"
    assert path.read_text(encoding="utf-8") == "<?php\n"
    assert model_path(tmp_path / "app", "Models/User") == path


def test_write_model_never_overwrites(tmp_path: Path) -> None:
    write_model(tmp_path, "Models/User", "first")

    with pytest.raises(ModelExistsError) as exc:
        write_model(tmp_path, "Models/User", "second")

    assert exc.value.path == tmp_path / "Models" / "User.php"
    assert (tmp_path / "Models" / "User.php").read_text(encoding="utf-8") == "first"


def test_write_model_is_exclusive_even_when_existence_check_misses(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "Models" / "User.php"
    target.parent.mkdir(parents=True)
    target.write_text("original", encoding="utf-8")
    monkeypatch.setattr(Path, "exists", lambda self: False)

    with pytest.raises(ModelExistsError):
        write_model(tmp_path, "Models/User", "replacement")

    assert target.read_text(encoding="utf-8") == "original"
