"""
Exception hierarchy for rule configuration and field validation.

Configuration errors point at a defect in the rule declarations and are
raised while rules are parsed or compiled. Validation errors describe input
data that does not satisfy a field's rules.
"""


class RuleConfigurationError(ValueError):
    """Raised when rule declarations are malformed."""


class InvalidRuleError(RuleConfigurationError):
    """Raised when a rule string cannot be parsed."""


class MessageCatalogError(RuntimeError):
    """Raised when a message cannot be resolved from the catalog."""


class ValidationError(Exception):
    """Raised when a field fails one of its rules."""

    def __init__(self, rule_name: str, field_name: str | int, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(rule={self.rule_name!r}, "
            f"field={self.field_name!r}, message={self.message!r})"
        )


class UnknownRuleError(ValidationError):
    """Raised when a meta-rule names a rule missing from the registry."""


class RequiredRuleViolation(ValidationError):
    """Raised when the `required` rule is dispatched like a value rule."""


class RequirementError(ValidationError):
    """
    Raised when a field's presence does not satisfy its requirement rules.

    Attributes:
        outcome: The RequirementOutcome that caused the failure
    """

    def __init__(self, rule_name: str, field_name: str | int, message: str, outcome):
        super().__init__(rule_name, field_name, message)
        self.outcome = outcome
