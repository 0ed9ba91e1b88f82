"""
Rule engine for validating data against per-field rule declarations.

For each field the engine resolves presence first (`required`,
`requiredWithout`), then reads the value and runs the remaining rules in
declaration order, stopping at the field's first failure.
"""

from collections.abc import Mapping
from typing import Any

from fieldrules.core.data_accessor import DataAccessor
from fieldrules.core.exceptions import RequirementError, UnknownRuleError, ValidationError
from fieldrules.core.models import FieldFailure, ValidationResult
from fieldrules.core.requirements import (
    REQUIREMENT_RULES,
    FieldRequirementConstraints,
    RequirementEngine,
)
from fieldrules.observability.logger import get_logger, log_operation

from .compiled_rules import CompiledRules
from .meta_rule import BaseMetaRule, MetaRule
from .rule_registry import RuleRegistry, default_registry

logger = get_logger(__name__)


class RuleEngine:
    """
    Validates datasets against compiled per-field rules.

    Rules are compiled once; each call to validate() or check() builds its
    own DataAccessor and RequirementEngines, so an engine can be reused.
    """

    RULE_NULLABLE = "nullable"

    def __init__(
        self,
        rules: Mapping[str | int, Any],
        custom_messages: Mapping[str, str] | None = None,
        registry: RuleRegistry | None = None,
    ):
        """
        Initialize the rule engine.

        Args:
            rules: Field -> rule string, callable, MetaRule, or a list of them
            custom_messages: "field.rule" -> message overrides
            registry: Rule registry (defaults to the built-in rules)

        Raises:
            RuleConfigurationError: If a rule declaration is malformed
        """
        self.registry = registry or default_registry()
        self.compiled_rules = CompiledRules(rules, custom_messages, self.registry)

        # Surface requirement declaration errors at setup, not per pass
        for field, meta_rules in self.compiled_rules.meta_rules_collection().items():
            FieldRequirementConstraints.from_meta_rules(field, meta_rules)

    def validate(self, data: Any) -> DataAccessor:
        """
        Validate data, raising on the first failing field.

        Args:
            data: Mapping, sequence, object or DataAccessor

        Returns:
            The DataAccessor over the validated data

        Raises:
            ValidationError: On the first failure
            RuleConfigurationError: If requirement declarations are invalid
        """
        data_accessor = data if isinstance(data, DataAccessor) else DataAccessor(data)
        collection = self.compiled_rules.meta_rules_collection()

        with log_operation("Validating data", logger=logger, field_count=len(collection)):
            for field, meta_rules in collection.items():
                self._validate_field(field, meta_rules, data_accessor)

        return data_accessor

    def check(self, data: Any) -> ValidationResult:
        """
        Validate every field and collect the first failure of each.

        Unknown rules and configuration errors still raise, since they are
        defects in the rules rather than in the data.

        Args:
            data: Mapping, sequence, object or DataAccessor

        Returns:
            ValidationResult listing validated fields and failures
        """
        data_accessor = data if isinstance(data, DataAccessor) else DataAccessor(data)
        validated_fields: list[str | int] = []
        failures: list[FieldFailure] = []

        for field, meta_rules in self.compiled_rules.meta_rules_collection().items():
            try:
                self._validate_field(field, meta_rules, data_accessor)
            except UnknownRuleError:
                raise
            except ValidationError as e:
                failures.append(FieldFailure(field=field, rule=e.rule_name, message=e.message))
                logger.warning(
                    "Field failed validation",
                    extra={"field": str(field), "rule": e.rule_name, "reason": e.message},
                )
            else:
                validated_fields.append(field)

        logger.info(
            "Validation check completed",
            extra={"passed_fields": len(validated_fields), "failed_fields": len(failures)},
        )

        return ValidationResult(
            passed=len(failures) == 0,
            validated_fields=validated_fields,
            failures=failures,
        )

    def check_configuration(self) -> list[str]:
        """
        List rule names that the registry cannot resolve.

        Returns:
            Sorted unknown rule names (empty when every rule is known)
        """
        unknown: set[str] = set()
        for meta_rules in self.compiled_rules.meta_rules_collection().values():
            for meta_rule in meta_rules:
                if not isinstance(meta_rule, MetaRule):
                    continue
                if meta_rule.name in REQUIREMENT_RULES or meta_rule.name == self.RULE_NULLABLE:
                    continue
                if not self.registry.has(meta_rule.name):
                    unknown.add(meta_rule.name)
        return sorted(unknown)

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of compiled rules.

        Returns:
            Dictionary with field and rule counts
        """
        rules_by_name: dict[str, int] = {}
        total_rules = 0
        for meta_rules in self.compiled_rules.meta_rules_collection().values():
            for meta_rule in meta_rules:
                rules_by_name[meta_rule.name] = rules_by_name.get(meta_rule.name, 0) + 1
                total_rules += 1

        return {
            "total_fields": len(self.compiled_rules.fields()),
            "total_rules": total_rules,
            "rules_by_name": rules_by_name,
        }

    def _validate_field(
        self,
        field: str | int,
        meta_rules: list[BaseMetaRule],
        data_accessor: DataAccessor,
    ) -> None:
        requirement_engine = RequirementEngine(field, meta_rules, data_accessor)
        try:
            requirement_engine.validate()
        except RequirementError as e:
            self._reraise_requirement_error(meta_rules, e)

        if requirement_engine.should_skip_further_validation():
            logger.debug("Skipping absent optional field", extra={"field": str(field)})
            return

        meta_rules = requirement_engine.filter_out_requirement_rules(meta_rules)
        value = data_accessor.get_field(field)

        if self._should_skip_due_to_nullable(meta_rules, value):
            logger.debug("Skipping null nullable field", extra={"field": str(field)})
            return
        meta_rules = [m for m in meta_rules if m.name != self.RULE_NULLABLE]

        for meta_rule in meta_rules:
            meta_rule.validate(field, value)

    def _should_skip_due_to_nullable(self, meta_rules: list[BaseMetaRule], value: Any) -> bool:
        has_nullable = any(m.name == self.RULE_NULLABLE for m in meta_rules)
        return has_nullable and value is None

    @staticmethod
    def _reraise_requirement_error(meta_rules: list[BaseMetaRule], error: RequirementError) -> None:
        """Re-raise a requirement error, substituting a configured custom message."""
        for meta_rule in meta_rules:
            if meta_rule.name == error.rule_name and meta_rule.custom_message is not None:
                raise RequirementError(
                    rule_name=error.rule_name,
                    field_name=error.field_name,
                    message=meta_rule.custom_message,
                    outcome=error.outcome,
                ) from error
        raise error
