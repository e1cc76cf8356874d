"""
Size rules: `min`, `max`, `len` and `between`.

Numbers are compared by value, strings by character count and containers by
item count. `None` is left to `required`.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Optional

from valdn.contracts.validator_rule import ValidatorRule
from valdn.core.messages import get_error_message
from valdn.exceptions.common_exceptions import InvalidConfigException, ValidationRuleException


def parse_number(rule: str, param: str) -> float:
    try:
        return float(param)
    except ValueError:
        raise InvalidConfigException(f"Rule `{rule}` expects a numeric parameter, got `{param}`") from None


def measure(value: Any) -> tuple[Optional[float], str]:
    """Return (size, message variant) or (None, "") when the value has no size."""
    if isinstance(value, bool):
        return None, ""
    if isinstance(value, (int, float)):
        return value, ""
    if isinstance(value, str):
        return len(value), "string"
    if isinstance(value, Sized):
        return len(value), "size"
    return None, ""


def _message(rule: str, variant: str, param: str, name: str) -> str:
    key = f"{rule}.{variant}" if variant else rule
    return get_error_message(key, param, name)


class MinValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        limit = parse_number("min", param)
        size, variant = measure(value)
        if size is None or size < limit:
            raise ValidationRuleException(_message("min", variant, param, name), name=name)


class MaxValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        limit = parse_number("max", param)
        size, variant = measure(value)
        if size is None or size > limit:
            raise ValidationRuleException(_message("max", variant, param, name), name=name)


class LenValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        expected = parse_number("len", param)
        size, _ = measure(value)
        if size is None or size != expected:
            raise ValidationRuleException(get_error_message("len", param, name), name=name)


class BetweenValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        low, sep, high = param.partition(",")
        if not sep:
            raise InvalidConfigException(f"Rule `between` expects `min,max`, got `{param}`")
        low_limit, high_limit = parse_number("between", low), parse_number("between", high)
        size, _ = measure(value)
        if size is None or not low_limit <= size <= high_limit:
            raise ValidationRuleException(get_error_message("between", f"{low} and {high}", name), name=name)
