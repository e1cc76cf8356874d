from __future__ import annotations

from typing import Any, Optional, Sequence

from valdn.config import RULE_PARAM_SEPARATOR
from valdn.core.registry import RuleRegistry, get_registry
from valdn.exceptions.common_exceptions import ValidationRuleException


def split_rule(expression: str) -> tuple[str, str]:
    """`min:18` -> ("min", "18"), `required` -> ("required", "")."""
    name, _, param = expression.partition(RULE_PARAM_SEPARATOR)
    return name.strip(), param


def validate(name: str, value: Any, rules: Sequence[str], *, registry: Optional[RuleRegistry] = None) -> None:
    """
    Validate a single value by an ordered list of rule expressions.

    Stops at the first failing rule. Empty or blank expressions are skipped.

    Args:
        name: Field path reported in messages.
        value: The value to check.
        rules: Rule expressions such as ["required", "min:3"].
        registry: Rule lookup, the shared default registry when omitted.

    Raises:
        ValidationRuleException: The first failure.
        UnknownRuleException: If a rule is not registered.
    """
    registry = registry if registry is not None else get_registry()
    for expression in rules:
        if not expression.strip():
            continue
        rule_name, param = split_rule(expression)
        rule = registry.get(rule_name)
        rule(name, value, param)


def evaluate(name: str, value: Any, rules: Sequence[str], *, registry: Optional[RuleRegistry] = None) -> Optional[str]:
    """Like `validate`, but returns the failure message instead of raising it."""
    try:
        validate(name, value, rules, registry=registry)
    except ValidationRuleException as exc:
        return exc.message
    return None
