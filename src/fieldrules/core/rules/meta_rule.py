"""
Meta-rules bind a rule (or a callable) to a field's validation pass.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from fieldrules.core.exceptions import UnknownRuleError, ValidationError
from fieldrules.core.messages import get_messages

from .rule_registry import RuleRegistry, default_registry

CUSTOM_RULE_NAME = "custom"


class BaseMetaRule(ABC):
    """
    A rule as declared for one field: name, parameter and an optional
    custom failure message.

    Instances are read-only after construction.
    """

    __slots__ = ("_name", "_parameter", "_custom_message")

    def __init__(self, name: str, parameter: Any = None, custom_message: str | None = None):
        self._name = name.lower()
        self._parameter = parameter
        self._custom_message = custom_message

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameter(self) -> Any:
        return self._parameter

    @property
    def custom_message(self) -> str | None:
        return self._custom_message

    @abstractmethod
    def validate(self, field: str | int, value: Any) -> None:
        """
        Validate a field value.

        Raises:
            ValidationError: If validation fails
        """
        pass

    @abstractmethod
    def with_custom_message(self, custom_message: str | None) -> "BaseMetaRule":
        """Return a copy of this meta-rule carrying `custom_message`."""
        pass

    def _raise_custom(self, field: str | int, error: ValidationError) -> None:
        """Re-raise `error` with the custom message, if one was supplied."""
        if self._custom_message is None:
            raise error
        raise ValidationError(
            rule_name=error.rule_name,
            field_name=field,
            message=self._custom_message,
        ) from error

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self._name == other._name
            and self._parameter == other._parameter
            and self._custom_message == other._custom_message
        )

    def __hash__(self) -> int:
        return hash((type(self), self._name, repr(self._parameter), self._custom_message))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, parameter={self._parameter!r}, "
            f"custom_message={self._custom_message!r})"
        )


class MetaRule(BaseMetaRule):
    """
    A named rule dispatched through the rule registry.

    The parameter may be any value: rule strings yield a string or None,
    while programmatic callers can pass numbers directly (MetaRule("min", 10)).
    """

    __slots__ = ("_registry",)

    def __init__(
        self,
        name: str,
        parameter: Any = None,
        custom_message: str | None = None,
        registry: RuleRegistry | None = None,
    ):
        super().__init__(name, parameter, custom_message)
        self._registry = registry

    def validate(self, field: str | int, value: Any) -> None:
        """
        Validate a field value with the registered rule.

        Args:
            field: Field identifier
            value: The field value to validate

        Raises:
            UnknownRuleError: If no rule is registered under this name
            ValidationError: If the rule fails; carries the custom message
                instead of the rule's own message when one was supplied
        """
        registry = self._registry or default_registry()
        rule = registry.create(self._name)
        if rule is None:
            raise UnknownRuleError(
                rule_name=self._name,
                field_name=field,
                message=get_messages().get("unknown_rule", self._name),
            )

        try:
            rule.validate(field, value, self._parameter)
        except ValidationError as e:
            self._raise_custom(field, e)

    def with_custom_message(self, custom_message: str | None) -> "MetaRule":
        return MetaRule(self._name, self._parameter, custom_message, self._registry)


class CustomMetaRule(BaseMetaRule):
    """
    Wraps a callable taking the field value.

    The check fails only when the callable returns `False`; any other return
    value (including None) passes.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Any], custom_message: str | None = None):
        if not callable(func):
            raise TypeError("CustomMetaRule requires a callable")
        super().__init__(CUSTOM_RULE_NAME, None, custom_message)
        self._func = func

    @property
    def func(self) -> Callable[[Any], Any]:
        return self._func

    def validate(self, field: str | int, value: Any) -> None:
        if self._func(value) is not False:
            return
        error = ValidationError(
            rule_name=self._name,
            field_name=field,
            message=get_messages().get("field_failed_custom_validation", field),
        )
        self._raise_custom(field, error)

    def with_custom_message(self, custom_message: str | None) -> "CustomMetaRule":
        return CustomMetaRule(self._func, custom_message)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._func is other._func and self._custom_message == other._custom_message

    def __hash__(self) -> int:
        return hash((type(self), id(self._func), self._custom_message))
