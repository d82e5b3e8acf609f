"""Naming module."""

from .conversion import (
    array_literal_text,
    boolean_literal_text,
    derive_path_stem,
    to_class_name,
)

__all__ = [
    "array_literal_text",
    "boolean_literal_text",
    "derive_path_stem",
    "to_class_name",
]
