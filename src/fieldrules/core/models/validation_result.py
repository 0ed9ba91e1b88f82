"""
ValidationResult model representing the outcome of validating a dataset (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class FieldFailure(BaseModel):
    """
    The first failure recorded for a single field.

    Attributes:
        field: Field identifier (name or index)
        rule: Name of the rule that failed
        message: User-facing error message
    """

    field: str | int
    rule: str
    message: str


class ValidationResult(BaseModel):
    """
    Outcome of validating a dataset against a rule set.

    Note: ValidationResult is ephemeral, not persisted anywhere.

    Attributes:
        passed: Overall validation status
        validated_fields: Fields whose rules all passed or were skipped
        failures: One entry per failed field, in rule declaration order
    """

    passed: bool
    validated_fields: list[str | int] = Field(default_factory=list)
    failures: list[FieldFailure] = Field(default_factory=list)

    @field_validator("failures")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failures is empty."""
        if info.data.get("passed") and len(v) > 0:
            raise ValueError("passed=True but failures is not empty")
        return v

    def messages(self) -> dict[str | int, str]:
        """Map each failed field to its message."""
        return {failure.field: failure.message for failure in self.failures}

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "validated_fields": ["name"],
                "failures": [
                    {
                        "field": "age",
                        "rule": "min",
                        "message": "Field 'age' must have a minimum value of 18.",
                    }
                ],
            }
        }
