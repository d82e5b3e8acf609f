"""Model file persistence."""

from __future__ import annotations

from pathlib import Path

from model_generator.common import ModelExistsError
from model_generator.renderer import split_path_stem

MODEL_SUFFIX = ".php"


def model_path(output_root: Path, path_stem: str) -> Path:
    directories, class_name = split_path_stem(path_stem)
    return output_root.joinpath(*directories, f"{class_name}{MODEL_SUFFIX}")


def write_model(output_root: Path, path_stem: str, content: str) -> Path:
    """Writes a rendered model. Existing files are never overwritten."""

    path = model_path(output_root, path_stem)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8") as file_obj:
            file_obj.write(content)
    except FileExistsError as exc:
        raise ModelExistsError(path) from exc
    return path
