"""
Base rule interface for all value rules.

All rules must inherit from Rule and implement validate() and rule_name.
"""

from abc import ABC, abstractmethod
from typing import Any, NoReturn

from fieldrules.core.exceptions import ValidationError
from fieldrules.core.messages import get_messages

from .native_functions import NativeFunctions


class Rule(ABC):
    """
    Abstract base class for all rules.

    A rule checks one (field, value, parameter) triple. Rules keep no state
    apart from the shared predicate helper, so one instance can serve every
    field and every validation pass.
    """

    def __init__(self, native_functions: NativeFunctions):
        """
        Initialize rule.

        Args:
            native_functions: Predicate helper used for type checks
        """
        self.native_functions = native_functions

    @abstractmethod
    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        """
        Validate a value against this rule.

        Args:
            field: Field identifier, used in messages
            value: The field value to validate
            parameter: Rule parameter (e.g. the bound of "min:10"), or None

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return the rule name identifier."""
        pass

    def fail(self, field: str | int, key: str, *args: Any) -> NoReturn:
        """Raise a ValidationError with a message from the catalog."""
        raise ValidationError(
            rule_name=self.rule_name,
            field_name=field,
            message=get_messages().get(key, *args),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
