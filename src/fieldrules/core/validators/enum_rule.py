"""
EnumRule - validates values against the members of an Enum class.
"""

from enum import Enum
from typing import Any

from .base_rule import Rule
from .native_functions import NativeFunctions


class EnumRule(Rule):
    """
    Validates that a value is a member of an Enum class.

    The parameter is the Enum class itself (MetaRule("enum", Status)), a name
    registered with RuleRegistry.register_enum(), or the class's dotted
    import path ("enum:myapp.models.Status").
    """

    def __init__(self, native_functions: NativeFunctions):
        super().__init__(native_functions)
        self.enum_classes: dict[str, type[Enum]] = {}

    def validate(self, field: str | int, value: Any, parameter: Any = None) -> None:
        if not isinstance(parameter, (str, type)):
            self.fail(field, "enum_requires_enum_class")

        enum_class = self._resolve(parameter)
        if enum_class is not None and self.native_functions.is_enum_value(value, enum_class):
            return

        enum_name = parameter.__name__ if isinstance(parameter, type) else parameter
        self.fail(field, "field_must_be_a_valid_enum_value", field, enum_name)

    def _resolve(self, parameter: str | type) -> type[Enum] | None:
        if isinstance(parameter, str) and parameter.strip() in self.enum_classes:
            return self.enum_classes[parameter.strip()]
        return self.native_functions.resolve_enum(parameter)

    @property
    def rule_name(self) -> str:
        return "enum"
