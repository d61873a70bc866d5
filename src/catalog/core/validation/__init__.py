"""Validation pipeline: declarative field rules evaluated into one error list."""

from .pipeline import (
    FieldError,
    ValidationResult,
    escape_markup,
    normalize_many,
    validate,
)
from .rules import FieldRule

__all__ = [
    "FieldError",
    "FieldRule",
    "ValidationResult",
    "escape_markup",
    "normalize_many",
    "validate",
]
