"""
EmailRule, RegexRule and DatetimeRule - validate string formats.
"""

from typing import Any

from .base_rule import Rule


class EmailRule(Rule):
    """Validates that a value is a syntactically valid email address."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if self.native_functions.is_email_address(value):
            return
        self.fail(field, "field_must_be_a_valid_email", field)

    @property
    def rule_name(self) -> str:
        return "email"


class RegexRule(Rule):
    """
    Validates that a string value contains a match for a regular expression.

    The parameter is a Python `re` pattern; anchor it with ^ and $ to match
    the whole value. A pattern that does not compile never matches.
    """

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_string(value):
            self.fail(field, "field_must_be_a_string", field)

        if not self.native_functions.is_string(parameter):
            self.fail(field, "regex_requires_pattern")

        if self.native_functions.match_regex(value, parameter):
            return

        self.fail(field, "field_must_match_pattern", field, parameter)

    @property
    def rule_name(self) -> str:
        return "regex"


class DatetimeRule(Rule):
    """Validates that a string is a date/time in the strftime format given as parameter."""

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not self.native_functions.is_string(value):
            self.fail(field, "field_must_be_a_string", field)

        if not self.native_functions.is_string(parameter):
            self.fail(field, "datetime_requires_format")

        if self.native_functions.match_datetime(value, parameter):
            return

        self.fail(field, "field_must_match_datetime_format", field, parameter)

    @property
    def rule_name(self) -> str:
        return "datetime"
