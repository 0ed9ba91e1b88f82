"""
Rule configuration management.

Loads rule declarations from YAML files and provides a fluent builder for
declaring rules in code.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import BaseModel, Field

from fieldrules.core.exceptions import RuleConfigurationError
from fieldrules.observability.logger import get_logger

from .rule_engine import RuleEngine
from .rule_registry import RuleRegistry

logger = get_logger(__name__)


class RuleFile(BaseModel):
    """
    Structure of a YAML rule file.

    Attributes:
        rules: Field -> rule string or list of rule strings
        messages: "field.rule" -> custom message
    """

    rules: dict[str | int, str | list[str]] = Field(..., min_length=1)
    messages: dict[str, str] = Field(default_factory=dict)


class RuleConfigLoader:
    """
    Loads rule declarations from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      name: [required, string, "maxLength:50"]
      age:
        - required
        - integer
        - "min:18"
      email: "requiredWithout:phone"
      phone: "requiredWithout:email"

    messages:
      age.min: "You must be an adult to register."
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load(self) -> RuleFile:
        """
        Load and check the rule file.

        Returns:
            RuleFile with rule declarations and custom messages

        Raises:
            RuleConfigurationError: If the YAML is invalid or has the wrong shape
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleConfigurationError("Configuration file must contain 'rules' section")

        try:
            rule_file = RuleFile.model_validate(config)
        except pydantic.ValidationError as e:
            raise RuleConfigurationError(f"Invalid rule configuration in {self.config_path}: {e}")

        logger.debug(
            "Loaded rule configuration",
            extra={"path": str(self.config_path), "field_count": len(rule_file.rules)},
        )
        return rule_file

    def build_engine(self, registry: RuleRegistry | None = None) -> RuleEngine:
        """Load the file and compile it into a RuleEngine."""
        rule_file = self.load()
        return RuleEngine(rule_file.rules, rule_file.messages, registry=registry)


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for tests or dynamic rules).

    Example:
        engine = RuleConfigBuilder() \\
            .required("name").string("name") \\
            .numeric("age").min("age", 18) \\
            .message("age", "min", "Too young.") \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str | int, list[Any]] = {}
        self.messages: dict[str, str] = {}

    def add_rule(self, field: str | int, rule: str | Callable[[Any], Any]) -> "RuleConfigBuilder":
        """Add a rule string (or a custom callable) to a field."""
        self.rules.setdefault(field, []).append(rule)
        return self

    def required(self, field: str | int) -> "RuleConfigBuilder":
        return self.add_rule(field, "required")

    def required_without(self, field: str | int, other_field: str | int) -> "RuleConfigBuilder":
        """Make `field` and `other_field` mutually exclusive alternatives."""
        return self.add_rule(field, f"requiredWithout:{other_field}")

    def nullable(self, field: str | int) -> "RuleConfigBuilder":
        return self.add_rule(field, "nullable")

    def string(self, field: str | int) -> "RuleConfigBuilder":
        return self.add_rule(field, "string")

    def numeric(self, field: str | int, strict: bool = False) -> "RuleConfigBuilder":
        return self.add_rule(field, "numeric:strict" if strict else "numeric")

    def min(self, field: str | int, minimum: float) -> "RuleConfigBuilder":
        return self.add_rule(field, f"min:{minimum}")

    def max(self, field: str | int, maximum: float) -> "RuleConfigBuilder":
        return self.add_rule(field, f"max:{maximum}")

    def custom(self, field: str | int, func: Callable[[Any], Any]) -> "RuleConfigBuilder":
        return self.add_rule(field, func)

    def message(self, field: str | int, rule: str, text: str) -> "RuleConfigBuilder":
        """Set the custom message shown when `rule` fails for `field`."""
        self.messages[f"{field}.{rule}"] = text
        return self

    def build(self, registry: RuleRegistry | None = None) -> RuleEngine:
        """Compile the collected rules into a RuleEngine."""
        return RuleEngine(self.rules, self.messages, registry=registry)
