"""
Parser for rule strings of the form "name" or "name:parameter".
"""

from fieldrules.core.exceptions import InvalidRuleError
from fieldrules.core.messages import get_messages
from fieldrules.core.models import RuleSpec

PARAMETER_SEPARATOR = ":"


class RuleParser:
    """
    Splits a rule string into a canonical name and an optional parameter.

    Examples:
        >>> RuleParser.parse("min:10").as_tuple()
        ('min', '10')
        >>> RuleParser.parse(" Required ").as_tuple()
        ('required', None)
        >>> RuleParser.parse("min: ").as_tuple()
        ('min', None)
    """

    @staticmethod
    def parse(rule: str) -> RuleSpec:
        """
        Parse a rule string.

        Only the first ":" separates name from parameter, so parameters may
        contain colons themselves ("datetime:%H:%M").

        Args:
            rule: Rule string

        Returns:
            RuleSpec with a lower-cased name and a trimmed parameter, or None
            when the parameter is absent or blank

        Raises:
            InvalidRuleError: If the rule name is empty
        """
        name, separator, parameter = rule.partition(PARAMETER_SEPARATOR)
        name = name.strip()
        if name == "":
            raise InvalidRuleError(get_messages().get("rule_must_be_non_empty"))

        parameter = parameter.strip() if separator else ""
        return RuleSpec(name=name.lower(), parameter=parameter or None)
