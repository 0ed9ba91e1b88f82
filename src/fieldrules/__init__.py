"""
fieldrules - declarative field-level validation.

Example:
    >>> from fieldrules import RuleEngine
    >>> engine = RuleEngine({"age": ["required", "integer", "min:18"]})
    >>> engine.check({"age": 21}).passed
    True
"""

from fieldrules.core.data_accessor import DataAccessor
from fieldrules.core.exceptions import (
    InvalidRuleError,
    MessageCatalogError,
    RequiredRuleViolation,
    RequirementError,
    RuleConfigurationError,
    UnknownRuleError,
    ValidationError,
)
from fieldrules.core.models import FieldFailure, RuleSpec, ValidationResult
from fieldrules.core.rules import (
    MetaRule,
    RuleConfigBuilder,
    RuleConfigLoader,
    RuleEngine,
    RuleParser,
    RuleRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "DataAccessor",
    "RuleEngine",
    "RuleParser",
    "RuleRegistry",
    "MetaRule",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleSpec",
    "FieldFailure",
    "ValidationResult",
    "ValidationError",
    "UnknownRuleError",
    "RequiredRuleViolation",
    "RequirementError",
    "RuleConfigurationError",
    "InvalidRuleError",
    "MessageCatalogError",
]
