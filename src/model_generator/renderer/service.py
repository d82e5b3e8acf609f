"""Model stub rendering."""

from __future__ import annotations

from pathlib import Path
import re

from model_generator.common import ClassificationResult, UserInputError
from model_generator.naming import array_literal_text, boolean_literal_text
from model_generator.rules import GeneratorConfig

DEFAULT_STUB_PATH = Path(__file__).resolve().parent / "stubs" / "model.stub"


def load_stub(stub_path: Path | None = None) -> str:
    path = stub_path or DEFAULT_STUB_PATH
    if not path.exists():
        raise UserInputError(f"Stub file not found: {path}")
    return path.read_text(encoding="utf-8")


def split_path_stem(path_stem: str) -> tuple[tuple[str, ...], str]:
    """Splits ``Models/Admin/User`` into directories and the class name."""

    parts = [part for part in re.split(r"[\\/]+", path_stem) if part]
    if not parts:
        return (), ""
    return tuple(parts[:-1]), parts[-1]


def model_namespace(root_namespace: str, path_stem: str) -> str:
    directories, _ = split_path_stem(path_stem)
    return "\\".join(part for part in (root_namespace.strip("\\"), *directories) if part)


def render_model(
    stub: str,
    table_name: str,
    path_stem: str,
    classification: ClassificationResult,
    config: GeneratorConfig,
) -> str:
    """Substitutes classification results into the model stub."""

    _, class_name = split_path_stem(path_stem)

    table_line = ""
    if table_name != class_name:
        table_line = f"protected $table = '{table_name}';"

    primary_key_line = ""
    if classification.primary_key and classification.primary_key != "id":
        primary_key_line = f"protected $primaryKey = '{classification.primary_key}';"

    replacements = {
        "{{namespace}}": model_namespace(config.root_namespace, path_stem),
        "{{class}}": class_name,
        "{{extends}}": config.extends,
        "{{tablename}}": table_line,
        "{{primaryKey}}": primary_key_line,
        "{{fillable}}": f"protected $fillable = {array_literal_text(classification.fillable)};",
        "{{guarded}}": f"protected $guarded = {array_literal_text(classification.guarded)};",
        "{{timestamps}}": f"public $timestamps = {boolean_literal_text(classification.timestamps)};",
    }

    rendered = stub
    for token, value in replacements.items():
        rendered = rendered.replace(token, value)
    return _tidy_blank_lines(rendered)


def _tidy_blank_lines(text: str) -> str:
    """Removes lines left blank by empty optional tokens."""
    tidied: list[str] = []
    for line in text.splitlines():
        if not line.strip():
            if not tidied or not tidied[-1] or tidied[-1].rstrip().endswith("{"):
                continue
            tidied.append("")
            continue
        if line.strip() == "}" and tidied and not tidied[-1]:
            tidied.pop()
        tidied.append(line)
    return "\n".join(tidied) + "\n"
