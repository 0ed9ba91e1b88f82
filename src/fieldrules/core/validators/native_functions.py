"""
Type and format predicates shared by all rules.

Rules receive a NativeFunctions instance instead of calling these checks
directly, so tests can substitute individual predicates.
"""

import importlib
import math
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

NUMERIC_STRING_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
INTEGER_STRING_PATTERN = re.compile(r"^\s*[+-]?(0|[1-9]\d*)\s*$")
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)


class NativeFunctions:
    """
    Thin predicates over Python's built-in type and format checks.

    Booleans are never treated as numbers even though `bool` subclasses `int`.
    """

    def is_numeric(self, value: Any) -> bool:
        """Finite numbers and numeric strings ("12", " -1.5", "2e3")."""
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, float):
            return math.isfinite(value)
        if isinstance(value, Decimal):
            return value.is_finite()
        if isinstance(value, str):
            return NUMERIC_STRING_PATTERN.match(value) is not None
        return False

    def is_number(self, value: Any) -> bool:
        """Numbers only; numeric strings are rejected."""
        if isinstance(value, bool):
            return False
        return isinstance(value, (int, float, Decimal))

    def is_string(self, value: Any) -> bool:
        return isinstance(value, str)

    def is_integer(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def is_integer_like(self, value: Any) -> bool:
        """Integers, integral floats and integer strings without leading zeros."""
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, float):
            return value.is_integer()
        if isinstance(value, str):
            return INTEGER_STRING_PATTERN.match(value) is not None
        return False

    def is_email_address(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return EMAIL_PATTERN.match(value) is not None

    def match_regex(self, value: str, pattern: str) -> bool:
        """Search `value` for `pattern`; an invalid pattern never matches."""
        try:
            return re.search(pattern, value) is not None
        except re.error:
            return False

    def match_datetime(self, value: str, fmt: str) -> bool:
        """
        Check that `value` is a date/time written exactly in strftime format `fmt`.

        The parsed value must format back to the same text, so "2024-1-5" does
        not match "%Y-%m-%d".
        """
        try:
            parsed = datetime.strptime(value, fmt)
        except (ValueError, TypeError):
            return False
        return parsed.strftime(fmt) == value

    def resolve_enum(self, reference: Any) -> type[Enum] | None:
        """
        Resolve an Enum class from the class itself or its dotted import path
        ("myapp.models.Status").

        Returns:
            The Enum subclass, or None if the reference does not name one
        """
        if isinstance(reference, type):
            return reference if issubclass(reference, Enum) else None
        if not isinstance(reference, str):
            return None

        module_name, _, class_name = reference.strip().rpartition(".")
        if not module_name or not class_name:
            return None
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            return None

        enum_class = getattr(module, class_name, None)
        if isinstance(enum_class, type) and issubclass(enum_class, Enum):
            return enum_class
        return None

    def is_enum_value(self, value: Any, enum_class: type[Enum]) -> bool:
        """
        Check that `value` names a member of `enum_class`.

        Members themselves always match. Int-valued enums (IntEnum, IntFlag)
        match integer values and str-valued enums (StrEnum) match string
        values; a plain Enum matches its member names only.
        """
        if isinstance(value, enum_class):
            return True

        if issubclass(enum_class, int):
            if not self.is_integer(value):
                return False
        elif issubclass(enum_class, str):
            if not isinstance(value, str):
                return False
        else:
            return isinstance(value, str) and value in enum_class.__members__

        try:
            enum_class(value)
        except ValueError:
            return False
        return True

    def to_number(self, value: Any) -> Decimal:
        """
        Convert a numeric value to Decimal for exact comparisons.

        Raises:
            ValueError: If the value is not numeric
        """
        if not self.is_numeric(value):
            raise ValueError(f"Value is not numeric: {value!r}")
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Value is not numeric: {value!r}") from e
