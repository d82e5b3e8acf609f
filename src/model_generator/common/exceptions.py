"""Custom exceptions for command exit mapping."""

from __future__ import annotations

from pathlib import Path


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class ModelExistsError(Exception):
    """Raised when a model file is already present at the destination path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Model already exists: {path}")
        self.path = path
