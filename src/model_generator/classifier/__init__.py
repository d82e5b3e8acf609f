"""Classifier module."""

from .service import ColumnClassifier, classify_columns

__all__ = ["ColumnClassifier", "classify_columns"]
