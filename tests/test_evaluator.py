import pytest

from valdn import RuleRegistry, UnknownRuleException, ValidationRuleException
from valdn.core.evaluator import evaluate, split_rule, validate


def test_split_rule():
    assert split_rule("required") == ("required", "")
    assert split_rule("min:18") == ("min", "18")
    assert split_rule("regex:^a:b$") == ("regex", "^a:b$")


def test_validate_passes_silently(registry):
    assert validate("age", 20, ["required", "min:18"], registry=registry) is None


def test_validate_raises_first_failure(registry):
    with pytest.raises(ValidationRuleException) as exc:
        validate("age", None, ["required", "min:18"], registry=registry)
    assert exc.value.message == "age is required"


def test_evaluation_stops_at_first_failure(registry):
    calls = []

    @registry.rule("spy")
    def spy(name, value, param):
        calls.append(param)

    message = evaluate("age", 10, ["spy:1", "min:18", "spy:2"], registry=registry)

    assert message == "age must be at least 18"
    assert calls == ["1"]


def test_empty_expressions_are_skipped(registry):
    assert evaluate("name", "bob", ["", "required", ""], registry=registry) is None


def test_blank_expressions_are_skipped(registry):
    assert evaluate("name", "bob", [" ", "required", "\t"], registry=registry) is None


def test_empty_registry_knows_no_rules():
    with pytest.raises(UnknownRuleException):
        validate("name", "", ["required"], registry=RuleRegistry())


def test_unknown_rule_aborts(registry):
    with pytest.raises(UnknownRuleException) as exc:
        evaluate("name", "bob", ["required", "nope"], registry=registry)
    assert exc.value.rule_name == "nope"


def test_rule_receives_name_value_and_param(registry):
    seen = {}

    @registry.rule("capture")
    def capture(name, value, param):
        seen.update(name=name, value=value, param=param)

    evaluate("user.age", 42, ["capture:x"], registry=registry)

    assert seen == {"name": "user.age", "value": 42, "param": "x"}
