"""
RequiredRule - placeholder for the `required` rule name.
"""

from typing import Any

from fieldrules.core.exceptions import RequiredRuleViolation
from fieldrules.core.messages import get_messages

from .base_rule import Rule


class RequiredRule(Rule):
    """
    Registered so that `required` is never reported as an unknown rule.

    Presence is resolved by the RequirementEngine before any value rule runs,
    and the engine filters `required` out of the per-value rules. Reaching
    this rule means a meta-rule was dispatched without that resolution step.
    """

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        raise RequiredRuleViolation(
            rule_name=self.rule_name,
            field_name=field,
            message=get_messages().get("required_field_missing", field),
        )

    @property
    def rule_name(self) -> str:
        return "required"
