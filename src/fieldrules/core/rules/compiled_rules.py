"""
CompiledRules - turns user-defined rule declarations into meta-rules.
"""

from collections.abc import Mapping
from typing import Any

from fieldrules.core.exceptions import RuleConfigurationError

from .meta_rule import BaseMetaRule, CustomMetaRule, MetaRule
from .rule_parser import RuleParser
from .rule_registry import RuleRegistry

MESSAGE_KEY_SEPARATOR = "."


class CompiledRules:
    """
    Meta-rules per field, built once from declarations like:

    ```python
    {
        "name": ["required", "string", "maxLength:50"],
        "age": "numeric",
        "email": ["requiredWithout:phone", lambda v: v.endswith(".org")],
    }
    ```

    Custom messages are keyed "field.rule" ("age.min", "user.name.required").
    The key is split at its last dot and the rule part is case-insensitive.
    """

    def __init__(
        self,
        user_defined_rules: Mapping[str | int, Any],
        custom_messages: Mapping[str, str] | None = None,
        registry: RuleRegistry | None = None,
    ):
        """
        Compile rule declarations.

        Args:
            user_defined_rules: Field -> rule string, callable, MetaRule, or a list of them
            custom_messages: "field.rule" -> message overrides
            registry: Registry the meta-rules dispatch through

        Raises:
            RuleConfigurationError: If a declaration cannot be compiled
        """
        self.registry = registry
        self._custom_messages = self._index_custom_messages(custom_messages or {})
        self._meta_rules_collection: dict[str | int, list[BaseMetaRule]] = {}

        for field, rules in user_defined_rules.items():
            if not isinstance(rules, (list, tuple)):
                rules = [rules]
            meta_rules = [self._compile(field, rule) for rule in rules]
            self._meta_rules_collection[field] = meta_rules

    def meta_rules_collection(self) -> dict[str | int, list[BaseMetaRule]]:
        return self._meta_rules_collection

    def fields(self) -> list[str | int]:
        return list(self._meta_rules_collection)

    def _compile(self, field: str | int, rule: Any) -> BaseMetaRule:
        if isinstance(rule, BaseMetaRule):
            meta_rule = rule
        elif isinstance(rule, str):
            spec = RuleParser.parse(rule)
            meta_rule = MetaRule(spec.name, spec.parameter, registry=self.registry)
        elif callable(rule):
            meta_rule = CustomMetaRule(rule)
        else:
            raise RuleConfigurationError(
                f"Rule for field '{field}' must be a string or a callable, got {type(rule).__name__}"
            )

        custom_message = self._custom_messages.get((str(field), meta_rule.name))
        if custom_message is not None:
            meta_rule = meta_rule.with_custom_message(custom_message)
        return meta_rule

    @staticmethod
    def _index_custom_messages(custom_messages: Mapping[str, str]) -> dict[tuple[str, str], str]:
        index: dict[tuple[str, str], str] = {}
        for key, message in custom_messages.items():
            field, separator, rule_name = str(key).rpartition(MESSAGE_KEY_SEPARATOR)
            if not separator or field == "" or rule_name == "":
                raise RuleConfigurationError(
                    f"Custom message key '{key}' must have the form 'field.rule'"
                )
            index[(field, rule_name.strip().lower())] = message
        return index
