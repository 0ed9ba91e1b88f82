"""
CLI for validating data files against YAML rule files.

Usage:
    python -m fieldrules.cli.validate_cli validate --rules <rules.yaml> --data <data.json> [--fail-fast]
    python -m fieldrules.cli.validate_cli check-rules --rules <rules.yaml>
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from fieldrules.core.exceptions import RuleConfigurationError, UnknownRuleError, ValidationError
from fieldrules.core.rules import RuleConfigLoader
from fieldrules.observability.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_DATA = 1
EXIT_BAD_CONFIG = 2


def load_data_file(path: str | Path) -> Any:
    """
    Load a JSON or YAML data file (chosen by extension).

    Args:
        path: Path to the data file

    Returns:
        Parsed data
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def validate_command(args) -> int:
    """
    Validate a data file and print the result as JSON.

    Args:
        args: Command line arguments

    Returns:
        Process exit code
    """
    logger.info(f"Validating {args.data} against {args.rules}")

    try:
        engine = RuleConfigLoader(args.rules).build_engine()
    except (FileNotFoundError, RuleConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    try:
        data = load_data_file(args.data)
    except FileNotFoundError:
        print(f"Error: Data file not found: {args.data}", file=sys.stderr)
        return EXIT_INVALID_DATA
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        print(f"Error: Could not parse data file: {e}", file=sys.stderr)
        return EXIT_INVALID_DATA

    try:
        if args.fail_fast:
            try:
                engine.validate(data)
            except UnknownRuleError:
                raise
            except ValidationError as e:
                output = {
                    "passed": False,
                    "failures": [{"field": e.field_name, "rule": e.rule_name, "message": e.message}],
                }
            else:
                output = {"passed": True, "failures": []}
        else:
            output = engine.check(data).model_dump()
    except (RuleConfigurationError, UnknownRuleError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return EXIT_OK if output["passed"] else EXIT_INVALID_DATA


def check_rules_command(args) -> int:
    """
    Check that a rule file parses and only references known rules.

    Args:
        args: Command line arguments

    Returns:
        Process exit code
    """
    try:
        engine = RuleConfigLoader(args.rules).build_engine()
    except (FileNotFoundError, RuleConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    unknown = engine.check_configuration()
    summary = engine.get_rule_summary()

    print(f"Fields: {summary['total_fields']}")
    print(f"Rules:  {summary['total_rules']}")
    for name, count in sorted(summary["rules_by_name"].items()):
        print(f"  {name}: {count}")

    if unknown:
        print(f"Unknown rules: {', '.join(unknown)}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    print("All rules are valid")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the validation CLI."""
    parser = argparse.ArgumentParser(
        description="Validate data files against field rules",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON or YAML data file"
    )
    validate_parser.add_argument(
        "--rules",
        required=True,
        help="Path to YAML rule file"
    )
    validate_parser.add_argument(
        "--data",
        required=True,
        help="Path to JSON or YAML data file"
    )
    validate_parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing field"
    )

    # check-rules command
    check_parser = subparsers.add_parser(
        "check-rules",
        help="Check a rule file for syntax errors and unknown rules"
    )
    check_parser.add_argument(
        "--rules",
        required=True,
        help="Path to YAML rule file"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_BAD_CONFIG

    if args.command == "validate":
        return validate_command(args)
    return check_rules_command(args)


if __name__ == "__main__":
    sys.exit(main())
