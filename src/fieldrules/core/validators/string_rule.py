"""
StringRule - validates that a value is a string.
"""

from typing import Any

from .base_rule import Rule


class StringRule(Rule):
    """Passes for `str` values only; bytes and numbers fail."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if self.native_functions.is_string(value):
            return
        self.fail(field, "field_must_be_a_string", field)

    @property
    def rule_name(self) -> str:
        return "string"
