"""
Presence resolution for `required` and `requiredWithout` rules.
"""

from .field_requirement_constraints import (
    REQUIREMENT_RULES,
    RULE_REQUIRED,
    RULE_REQUIRED_WITHOUT,
    FieldRequirementConstraints,
)
from .requirement_engine import RequirementEngine, RequirementOutcome

__all__ = [
    "FieldRequirementConstraints",
    "RequirementEngine",
    "RequirementOutcome",
    "RULE_REQUIRED",
    "RULE_REQUIRED_WITHOUT",
    "REQUIREMENT_RULES",
]
