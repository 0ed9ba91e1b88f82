"""
MinRule and MaxRule - validate numeric values against an inclusive bound.
"""

from typing import Any

from .base_rule import Rule


class MinRule(Rule):
    """
    Validates that a numeric value is at least the parameter (inclusive).

    Both value and parameter may be numbers or numeric strings; they are
    compared as Decimals.
    """

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_numeric(value):
            self.fail(field, "field_must_be_numeric", field)

        if not self.native_functions.is_numeric(parameter):
            self.fail(field, "min_requires_number")

        if self.native_functions.to_number(value) >= self.native_functions.to_number(parameter):
            return

        self.fail(field, "field_min_value", field, parameter)

    @property
    def rule_name(self) -> str:
        return "min"


class MaxRule(Rule):
    """Validates that a numeric value is at most the parameter (inclusive)."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_numeric(value):
            self.fail(field, "field_must_be_numeric", field)

        if not self.native_functions.is_numeric(parameter):
            self.fail(field, "max_requires_number")

        if self.native_functions.to_number(value) <= self.native_functions.to_number(parameter):
            return

        self.fail(field, "field_max_value", field, parameter)

    @property
    def rule_name(self) -> str:
        return "max"
