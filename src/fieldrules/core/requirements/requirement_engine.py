"""
RequirementEngine - resolves a field's presence against its requirement rules.
"""

from enum import Enum

from fieldrules.core.data_accessor import DataAccessor
from fieldrules.core.exceptions import RequirementError
from fieldrules.core.messages import get_messages

from .field_requirement_constraints import (
    REQUIREMENT_RULES,
    RULE_REQUIRED,
    RULE_REQUIRED_WITHOUT,
    FieldRequirementConstraints,
)


class RequirementOutcome(str, Enum):
    """Result of resolving one field's presence."""

    VALID = "valid"
    MISSING_REQUIRED = "missing_required"
    MUTUALLY_EXCLUSIVE_CONFLICT = "mutually_exclusive_conflict"
    MISSING_WITHOUT_ALTERNATIVE = "missing_without_alternative"


class RequirementEngine:
    """
    Decides whether a field's presence satisfies `required` and
    `requiredWithout` declarations.

    Resolution order:

    - field present, a requiredWithout field also present: conflict
    - field present otherwise: valid
    - field absent, required: missing required (even when an alternative
      is present)
    - field absent, an alternative present: valid, skip the value rules
    - field absent, requiredWithout declared, no alternative present:
      missing without alternative
    - field absent, nothing declared: valid, skip the value rules

    Presence is read from the data accessor once, at construction.
    """

    def __init__(self, field: str | int, meta_rules: list, data_accessor: DataAccessor):
        """
        Initialize the engine.

        Args:
            field: Field identifier
            meta_rules: The field's meta-rules
            data_accessor: Accessor answering presence queries

        Raises:
            RuleConfigurationError: If the requirement declarations are invalid
        """
        self.field = field
        self.constraints = FieldRequirementConstraints.from_meta_rules(field, meta_rules)
        self.field_exists = data_accessor.has_field(field)
        self.any_required_without_field_exists = any(
            data_accessor.has_field(other_field)
            for other_field in self.constraints.required_without_fields()
        )

    def resolve(self) -> RequirementOutcome:
        """Resolve the field's presence to a RequirementOutcome."""
        if self.field_exists:
            if self.any_required_without_field_exists:
                return RequirementOutcome.MUTUALLY_EXCLUSIVE_CONFLICT
            return RequirementOutcome.VALID

        if self.constraints.is_required():
            return RequirementOutcome.MISSING_REQUIRED
        if self.any_required_without_field_exists:
            return RequirementOutcome.VALID
        if self.constraints.has_required_without_fields():
            return RequirementOutcome.MISSING_WITHOUT_ALTERNATIVE
        return RequirementOutcome.VALID

    def validate(self) -> None:
        """
        Raise if the field's presence does not satisfy its declarations.

        Raises:
            RequirementError: For every outcome other than VALID; `rule_name`
                names the requirement rule that failed
        """
        outcome = self.resolve()
        messages = get_messages()

        if outcome is RequirementOutcome.MUTUALLY_EXCLUSIVE_CONFLICT:
            raise RequirementError(
                rule_name=RULE_REQUIRED_WITHOUT,
                field_name=self.field,
                message=messages.get(
                    "only_one_of_fields_can_be_present",
                    self.field,
                    self.constraints.format_required_without_list(),
                ),
                outcome=outcome,
            )
        if outcome is RequirementOutcome.MISSING_REQUIRED:
            raise RequirementError(
                rule_name=RULE_REQUIRED,
                field_name=self.field,
                message=messages.get("required_field_missing", self.field),
                outcome=outcome,
            )
        if outcome is RequirementOutcome.MISSING_WITHOUT_ALTERNATIVE:
            raise RequirementError(
                rule_name=RULE_REQUIRED_WITHOUT,
                field_name=self.field,
                message=messages.get(
                    "either_field_or_other_must_be_present",
                    self.field,
                    self.constraints.format_required_without_list(),
                ),
                outcome=outcome,
            )

    def should_skip_further_validation(self) -> bool:
        """True when the field is absent and that absence is acceptable."""
        if self.field_exists:
            return False
        return self.any_required_without_field_exists or not self.constraints.is_required()

    @staticmethod
    def filter_out_requirement_rules(meta_rules: list) -> list:
        """Drop `required` and `requiredWithout` meta-rules, keeping order."""
        return [m for m in meta_rules if m.name not in REQUIREMENT_RULES]
