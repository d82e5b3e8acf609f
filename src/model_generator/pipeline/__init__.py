"""Pipeline module."""

from .service import plan_table, run_inspect, run_make_models

__all__ = ["plan_table", "run_inspect", "run_make_models"]
