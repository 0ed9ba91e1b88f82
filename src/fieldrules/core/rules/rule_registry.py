"""
Registry mapping rule names to rule implementations.
"""

from enum import Enum

from fieldrules.core.validators import (
    DatetimeRule,
    EmailRule,
    EnumRule,
    IntegerRule,
    MaxLengthRule,
    MaxRule,
    MinLengthRule,
    MinRule,
    NativeFunctions,
    NumericRule,
    RegexRule,
    RequiredRule,
    Rule,
    StringRule,
)


class RuleRegistry:
    """
    Maps lower-cased rule names to shared Rule instances.

    Instances are built once, when a name is registered; lookups only read,
    so one registry can serve concurrent validation passes.

    Lookups never raise for unknown names; `create()` returns None so the
    registry can be queried speculatively, e.g. to check a rule file.
    """

    RULE_REGISTRY: dict[str, type[Rule]] = {
        "required": RequiredRule,
        "string": StringRule,
        "numeric": NumericRule,
        "integer": IntegerRule,
        "min": MinRule,
        "max": MaxRule,
        "minlength": MinLengthRule,
        "maxlength": MaxLengthRule,
        "email": EmailRule,
        "regex": RegexRule,
        "datetime": DatetimeRule,
        "enum": EnumRule,
    }

    def __init__(self, native_functions: NativeFunctions | None = None):
        """
        Initialize the registry with the built-in rules.

        Args:
            native_functions: Predicate helper shared by every rule instance
        """
        self.native_functions = native_functions or NativeFunctions()
        self._rules: dict[str, Rule] = {
            name: rule_class(self.native_functions)
            for name, rule_class in self.RULE_REGISTRY.items()
        }

    def register(self, name: str, rule_class: type[Rule]) -> None:
        """
        Register (or replace) a rule class under `name`.

        Raises:
            TypeError: If rule_class is not a Rule subclass
        """
        if not (isinstance(rule_class, type) and issubclass(rule_class, Rule)):
            raise TypeError(f"Rule class must subclass Rule, got {rule_class!r}")
        self._rules[name.lower()] = rule_class(self.native_functions)

    def register_enum(self, name: str, enum_class: type[Enum]) -> None:
        """
        Make `enum_class` available to the `enum` rule as "enum:<name>".

        Raises:
            TypeError: If enum_class is not an Enum subclass, or the `enum`
                rule has been replaced by a class other than EnumRule
        """
        if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
            raise TypeError(f"Enum class must subclass Enum, got {enum_class!r}")
        rule = self._rules.get("enum")
        if not isinstance(rule, EnumRule):
            raise TypeError("The 'enum' rule is not an EnumRule")
        rule.enum_classes[name] = enum_class

    def has(self, name: str) -> bool:
        return name.lower() in self._rules

    def names(self) -> list[str]:
        return sorted(self._rules)

    def create(self, name: str) -> Rule | None:
        """
        Get the rule instance for `name`.

        Args:
            name: Rule name (case-insensitive)

        Returns:
            The shared Rule instance, or None if no rule has that name
        """
        return self._rules.get(name.lower())


_default_registry: RuleRegistry | None = None


def default_registry() -> RuleRegistry:
    """Get the process-wide registry of built-in rules."""
    global _default_registry
    if _default_registry is None:
        _default_registry = RuleRegistry()
    return _default_registry
