"""Common models and exceptions."""

from .exceptions import ModelExistsError, UserInputError
from .models import (
    ClassificationResult,
    ColumnDescriptor,
    GenerationOutcome,
    SchemaSnapshot,
    SkippedTable,
    TablePlan,
    TableSchema,
)

__all__ = [
    "ClassificationResult",
    "ColumnDescriptor",
    "GenerationOutcome",
    "ModelExistsError",
    "SchemaSnapshot",
    "SkippedTable",
    "TablePlan",
    "TableSchema",
    "UserInputError",
]
