"""Identifier conversion helpers for generated model classes."""

from __future__ import annotations

import re
from typing import Iterable

_SEGMENT_SPLIT = re.compile(r"[\W_]+")

_PLURAL_SUFFIXES = ("ies", "es", "s")
_SINGULAR_SUFFIX = "ss"


def to_class_name(table_name: str) -> str:
    """Converts ``user_accounts`` style names into ``UserAccounts``."""

    segments = (segment for segment in _SEGMENT_SPLIT.split(table_name) if segment)
    return "".join(segment[:1].upper() + segment[1:] for segment in segments)


def derive_path_stem(prefix: str, class_name: str) -> str:
    """Returns the output path stem with a heuristic singular class name.

    Trailing characters of the first matching plural suffix are stripped as a
    character set, not as a literal suffix, so ``Categories`` becomes
    ``Categor`` and ``Statuses`` becomes ``Statu``.
    """

    stem = prefix + class_name
    if class_name.endswith(_SINGULAR_SUFFIX):
        return stem

    for suffix in _PLURAL_SUFFIXES:
        if class_name.endswith(suffix):
            return stem.rstrip(suffix)
    return stem


def array_literal_text(names: Iterable[str]) -> str:
    quoted = ", ".join(f"'{name}'" for name in names)
    return f"[{quoted}]"


def boolean_literal_text(flag: bool) -> str:
    return "true" if flag else "false"
