"""Renderer module."""

from .service import DEFAULT_STUB_PATH, load_stub, model_namespace, render_model, split_path_stem

__all__ = ["DEFAULT_STUB_PATH", "load_stub", "model_namespace", "render_model", "split_path_stem"]
