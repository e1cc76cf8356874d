from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from valdn.contracts.validator_rule import Rule, ValidatorRule
from valdn.exceptions.common_exceptions import UnknownRuleException


class RuleRegistry:
    """
    Name -> rule lookup used by the evaluator.

    Usage:
        registry = RuleRegistry()
        registry.register("required", RequiredValidatorRule())

        @registry.rule("even")
        def even(name, value, param):
            if value % 2:
                raise ValidationRuleException(f"{name} must be even", name=name)
    """

    def __init__(self, rules: Optional[Dict[str, Rule]] = None):
        self._rules: Dict[str, Rule] = {}
        for name, rule in (rules or {}).items():
            self.register(name, rule)

    def register(self, name: str, rule: Rule) -> None:
        if not name:
            raise ValueError("Rule name must not be empty")
        if isinstance(rule, type) and issubclass(rule, ValidatorRule):
            rule = rule()
        if not callable(rule):
            raise TypeError(f"Rule `{name}` must be callable or a ValidatorRule")
        if name in self._rules:
            logging.debug(f"[VALDN] Overriding rule `{name}`")
        self._rules[name] = rule

    def rule(self, name: str) -> Callable[[Rule], Rule]:
        """Decorator form of `register`."""
        def decorator(func: Rule) -> Rule:
            self.register(name, func)
            return func

        return decorator

    def unregister(self, name: str) -> None:
        self._rules.pop(name, None)

    def get(self, name: str) -> Rule:
        """
        Raises:
            UnknownRuleException: If no rule is registered under `name`.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleException(name) from None

    def has(self, name: str) -> bool:
        return name in self._rules

    def names(self) -> List[str]:
        return sorted(self._rules)

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(dict(self._rules))

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._rules)


_default_registry: Optional[RuleRegistry] = None


def default_registry() -> RuleRegistry:
    """A fresh registry pre-loaded with the built-in rules."""
    from valdn.core.validation_rules import BUILTIN_RULES

    return RuleRegistry(BUILTIN_RULES)


def get_registry() -> RuleRegistry:
    """The shared registry used when an entry point is not given one."""
    global _default_registry
    if _default_registry is None:
        _default_registry = default_registry()
    return _default_registry
