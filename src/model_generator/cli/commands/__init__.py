"""CLI 커맨드 모듈."""

from __future__ import annotations

from types import ModuleType

from model_generator.cli.commands import inspect, make_models

COMMAND_MODULES: list[ModuleType] = [make_models, inspect]

__all__ = ["COMMAND_MODULES"]
