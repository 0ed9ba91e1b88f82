"""
Value rule implementations.

Provides rules for types (string, numeric, integer), numeric bounds,
string lengths, formats and enum membership, plus the `required` placeholder.
"""

from .base_rule import Rule
from .enum_rule import EnumRule
from .format_rule import DatetimeRule, EmailRule, RegexRule
from .length_rule import MaxLengthRule, MinLengthRule
from .native_functions import NativeFunctions
from .numeric_rule import IntegerRule, NumericRule
from .range_rule import MaxRule, MinRule
from .required_rule import RequiredRule
from .string_rule import StringRule

__all__ = [
    "Rule",
    "NativeFunctions",
    "RequiredRule",
    "StringRule",
    "NumericRule",
    "IntegerRule",
    "MinRule",
    "MaxRule",
    "MinLengthRule",
    "MaxLengthRule",
    "EmailRule",
    "RegexRule",
    "DatetimeRule",
    "EnumRule",
]
