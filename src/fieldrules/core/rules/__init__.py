"""
Rule parsing, dispatch and orchestration.
"""

from .compiled_rules import CompiledRules
from .meta_rule import BaseMetaRule, CustomMetaRule, MetaRule
from .rule_config import RuleConfigBuilder, RuleConfigLoader, RuleFile
from .rule_engine import RuleEngine
from .rule_parser import RuleParser
from .rule_registry import RuleRegistry, default_registry

__all__ = [
    "RuleParser",
    "RuleRegistry",
    "default_registry",
    "BaseMetaRule",
    "MetaRule",
    "CustomMetaRule",
    "CompiledRules",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleFile",
]
