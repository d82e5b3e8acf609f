"""Storage module."""

from .model_writer import model_path, write_model

__all__ = ["model_path", "write_model"]
