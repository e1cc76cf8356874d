from typing import Any

import pytest

from valdn import RuleRegistry, UnknownRuleException, ValidationRuleException, ValidatorRule, default_registry
from valdn.core.registry import get_registry


class EvenValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value % 2:
            raise ValidationRuleException(f"{name} must be even", name=name)


def test_default_registry_has_builtin_rules():
    names = default_registry().names()
    for rule in ("required", "min", "max", "len", "between", "email", "regex", "in", "numeric"):
        assert rule in names


def test_default_registries_are_independent():
    first = default_registry()
    first.unregister("email")
    assert "email" not in first
    assert "email" in default_registry()


def test_get_registry_is_shared():
    assert get_registry() is get_registry()


def test_register_class_instance_and_function():
    registry = RuleRegistry()
    registry.register("even", EvenValidatorRule)
    registry.register("odd", lambda name, value, param: None)

    assert isinstance(registry.get("even"), EvenValidatorRule)
    assert callable(registry.get("odd"))
    assert len(registry) == 2


def test_validator_rule_is_callable_like_a_function():
    with pytest.raises(ValidationRuleException) as exc:
        EvenValidatorRule()("count", 3, "")
    assert exc.value.message == "count must be even"


def test_decorator_registration():
    registry = RuleRegistry()

    @registry.rule("never")
    def never(name, value, param):
        raise ValidationRuleException("never valid")

    assert registry.get("never") is never


def test_unknown_rule_raises_configuration_error():
    with pytest.raises(UnknownRuleException):
        RuleRegistry().get("missing")


def test_register_rejects_non_callables():
    with pytest.raises(TypeError):
        RuleRegistry().register("bad", "not callable")
    with pytest.raises(ValueError):
        RuleRegistry().register("", lambda *a: None)


def test_copy_is_independent():
    registry = default_registry()
    copied = registry.copy()
    copied.unregister("min")
    assert "min" in registry
    assert "min" not in copied
