"""
Integration tests: YAML rule files validated end to end, including the CLI.
"""

import json
import os

import pytest

from fieldrules.cli.validate_cli import main
from fieldrules.core.exceptions import RequirementError
from fieldrules.core.rules import RuleConfigLoader

pytestmark = pytest.mark.integration


@pytest.fixture
def signup_rules(test_data_dir) -> str:
    return os.path.join(test_data_dir, "signup_rules.yaml")


def load_json(test_data_dir, name):
    with open(os.path.join(test_data_dir, name)) as f:
        return json.load(f)


class TestSignupRules:
    """Sign-up payloads validated against tests/fixtures/signup_rules.yaml"""

    def test_valid_payload(self, signup_rules, test_data_dir):
        engine = RuleConfigLoader(signup_rules).build_engine()

        result = engine.check(load_json(test_data_dir, "signup_valid.json"))

        assert result.passed is True
        assert result.validated_fields == [
            "username", "age", "email", "phone", "birthday", "address.city"
        ]

    def test_invalid_payload(self, signup_rules, test_data_dir):
        engine = RuleConfigLoader(signup_rules).build_engine()

        result = engine.check(load_json(test_data_dir, "signup_invalid.json"))

        assert result.passed is False
        assert result.messages() == {
            "username": "Field 'username' must match the required pattern: ^[a-z0-9_]+$",
            "age": "You must be at least 18 to sign up.",
            "email": "Please give either an email address or a phone number.",
            "phone": "Either 'phone' or 'email' must be present.",
            "birthday": "Field 'birthday' must match the datetime format: %Y-%m-%d",
            "address.city": "Field 'address.city' must be a string.",
        }

    def test_fail_fast_raises_first_failure(self, signup_rules):
        engine = RuleConfigLoader(signup_rules).build_engine()

        with pytest.raises(RequirementError) as exc_info:
            engine.validate({"username": "jane", "age": 30, "email": "a@b.co", "phone": "1"})

        assert exc_info.value.field_name == "email"


class TestValidateCli:
    """Tests for the fieldrules CLI"""

    def test_validate_valid_file(self, signup_rules, test_data_dir, capsys):
        code = main([
            "validate", "--rules", signup_rules,
            "--data", os.path.join(test_data_dir, "signup_valid.json"),
        ])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["passed"] is True

    def test_validate_invalid_file(self, signup_rules, test_data_dir, capsys):
        code = main([
            "validate", "--rules", signup_rules,
            "--data", os.path.join(test_data_dir, "signup_invalid.json"),
        ])

        output = json.loads(capsys.readouterr().out)
        assert code == 1
        assert len(output["failures"]) == 6

    def test_validate_fail_fast(self, signup_rules, test_data_dir, capsys):
        code = main([
            "validate", "--rules", signup_rules,
            "--data", os.path.join(test_data_dir, "signup_invalid.json"),
            "--fail-fast",
        ])

        output = json.loads(capsys.readouterr().out)
        assert code == 1
        assert output["failures"] == [{
            "field": "username",
            "rule": "regex",
            "message": "Field 'username' must match the required pattern: ^[a-z0-9_]+$",
        }]

    def test_validate_yaml_data(self, signup_rules, tmp_path, capsys):
        data = tmp_path / "data.yaml"
        data.write_text("username: ada\nage: 36\nphone: '555'\n")

        assert main(["validate", "--rules", signup_rules, "--data", str(data)]) == 0

    def test_validate_missing_rules_file(self, tmp_path, capsys):
        code = main([
            "validate", "--rules", str(tmp_path / "absent.yaml"), "--data", str(tmp_path / "x.json"),
        ])

        assert code == 2
        assert "not found" in capsys.readouterr().err

    @pytest.mark.parametrize("extra_args", [[], ["--fail-fast"]])
    def test_validate_unknown_rule_is_bad_config(self, tmp_path, capsys, extra_args):
        rules = tmp_path / "rules.yaml"
        rules.write_text("rules:\n  name: [bogus]\n")
        data = tmp_path / "data.json"
        data.write_text(json.dumps({"name": "Jane"}))

        code = main(["validate", "--rules", str(rules), "--data", str(data), *extra_args])

        captured = capsys.readouterr()
        assert code == 2
        assert "Unknown rule 'bogus'" in captured.err
        assert captured.out == ""

    def test_check_rules_valid(self, signup_rules, capsys):
        assert main(["check-rules", "--rules", signup_rules]) == 0
        assert "All rules are valid" in capsys.readouterr().out

    def test_check_rules_reports_unknown(self, test_data_dir, capsys):
        code = main(["check-rules", "--rules", os.path.join(test_data_dir, "broken_rules.yaml")])

        assert code == 2
        assert "Unknown rules: shout, strnig" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
