"""
FieldRequirementConstraints - the `required` and `requiredWithout`
declarations extracted from one field's meta-rules.
"""

from collections.abc import Iterable

from fieldrules.core.exceptions import RuleConfigurationError
from fieldrules.core.messages import get_messages

RULE_REQUIRED = "required"
RULE_REQUIRED_WITHOUT = "requiredwithout"
REQUIREMENT_RULES = (RULE_REQUIRED, RULE_REQUIRED_WITHOUT)


def same_field(a: str | int, b: str | int) -> bool:
    """Compare field identifiers; 3 and "3" name the same field."""
    return str(a) == str(b)


class FieldRequirementConstraints:
    """
    Read-only view of a field's requirement declarations.

    Attributes are set once in from_meta_rules() and never change.
    """

    __slots__ = ("_is_required", "_required_without_fields")

    def __init__(self, is_required: bool, required_without_fields: tuple[str | int, ...]):
        self._is_required = is_required
        self._required_without_fields = required_without_fields

    @classmethod
    def from_meta_rules(cls, field: str | int, meta_rules: Iterable) -> "FieldRequirementConstraints":
        """
        Scan meta-rules for requirement declarations.

        Args:
            field: The field the meta-rules belong to
            meta_rules: The field's meta-rules, in declaration order

        Returns:
            FieldRequirementConstraints for the field

        Raises:
            RuleConfigurationError: If a requiredWithout rule has no field name
                or names the field itself
        """
        is_required = False
        required_without_fields: list[str | int] = []

        for meta_rule in meta_rules:
            if meta_rule.name == RULE_REQUIRED:
                is_required = True
            elif meta_rule.name == RULE_REQUIRED_WITHOUT:
                other_field = meta_rule.parameter
                if other_field is None:
                    raise RuleConfigurationError(
                        get_messages().get("requiredwithout_requires_field_name")
                    )
                if same_field(other_field, field):
                    raise RuleConfigurationError(
                        get_messages().get("requiredwithout_cannot_reference_itself")
                    )
                required_without_fields.append(other_field)

        return cls(is_required, tuple(required_without_fields))

    def is_required(self) -> bool:
        return self._is_required

    def required_without_fields(self) -> tuple[str | int, ...]:
        return self._required_without_fields

    def has_required_without_fields(self) -> bool:
        return len(self._required_without_fields) > 0

    def format_required_without_list(self) -> str:
        """
        Render the mutually exclusive fields for messages.

        Returns:
            "'b'" for a single field, "one of 'b', 'c'" for several
        """
        if len(self._required_without_fields) > 1:
            one_of = "', '".join(str(f) for f in self._required_without_fields)
            return f"one of '{one_of}'"
        if self._required_without_fields:
            return f"'{self._required_without_fields[0]}'"
        return ""

    def __repr__(self) -> str:
        return (
            f"FieldRequirementConstraints(is_required={self._is_required}, "
            f"required_without_fields={list(self._required_without_fields)})"
        )
