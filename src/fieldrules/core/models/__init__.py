"""
Data models for rule parsing and validation results.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_spec import RuleSpec
from .validation_result import FieldFailure, ValidationResult

__all__ = [
    "RuleSpec",
    "FieldFailure",
    "ValidationResult",
]
