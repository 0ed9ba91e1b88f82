"""
MinLengthRule and MaxLengthRule - validate string lengths.
"""

from typing import Any

from .base_rule import Rule


class MinLengthRule(Rule):
    """Validates that a string has at least `parameter` characters."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_string(value):
            self.fail(field, "field_must_be_a_string", field)

        if not self.native_functions.is_integer_like(parameter):
            self.fail(field, "minlength_requires_integer")

        if len(value) >= int(parameter):
            return

        self.fail(field, "field_min_length", field, parameter)

    @property
    def rule_name(self) -> str:
        return "minlength"


class MaxLengthRule(Rule):
    """Validates that a string has at most `parameter` characters."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_string(value):
            self.fail(field, "field_must_be_a_string", field)

        if not self.native_functions.is_integer_like(parameter):
            self.fail(field, "maxlength_requires_integer")

        if len(value) <= int(parameter):
            return

        self.fail(field, "field_max_length", field, parameter)

    @property
    def rule_name(self) -> str:
        return "maxlength"
