"""
NumericRule and IntegerRule - validate numbers and integers.
"""

from typing import Any

from .base_rule import Rule

STRICT = "strict"


class NumericRule(Rule):
    """
    Validates that a value is numeric.

    Parameters:
    - None: numbers and numeric strings ("42", "-1.5", "2e3") pass
    - "strict": only int, float and Decimal values pass
    """

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if parameter == STRICT:
            if self.native_functions.is_number(value):
                return
        elif parameter is None:
            if self.native_functions.is_numeric(value):
                return
        else:
            self.fail(field, "numeric_requires_strict_or_nothing")

        self.fail(field, "field_must_be_numeric", field)

    @property
    def rule_name(self) -> str:
        return "numeric"


class IntegerRule(Rule):
    """
    Validates that a value is an integer.

    Parameters:
    - None: ints, integral floats and integer strings ("42") pass
    - "strict": only int values pass
    """

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if parameter == STRICT:
            if self.native_functions.is_integer(value):
                return
        elif parameter is None:
            if self.native_functions.is_integer_like(value):
                return
        else:
            self.fail(field, "integer_requires_strict_or_nothing")

        self.fail(field, "field_must_be_an_integer", field)

    @property
    def rule_name(self) -> str:
        return "integer"
