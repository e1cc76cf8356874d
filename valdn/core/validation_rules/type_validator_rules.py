"""
Type and choice rules.

Values decoded from forms and query strings arrive as text, so `numeric`,
`integer` and `boolean` also accept their textual forms.
"""

from __future__ import annotations

import re
from typing import Any

from valdn.contracts.validator_rule import ValidatorRule
from valdn.core.messages import get_error_message
from valdn.exceptions.common_exceptions import ValidationRuleException

INTEGER_PATTERN = re.compile(r"[+-]?\d+")
BOOLEAN_STRINGS = {"true", "false", "1", "0"}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class NumericValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None or _is_number(value):
            return
        if isinstance(value, str):
            try:
                float(value)
                return
            except ValueError:
                pass
        raise ValidationRuleException(get_error_message("numeric", param, name), name=name)


class IntegerValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        if isinstance(value, int) and not isinstance(value, bool):
            return
        if isinstance(value, float) and value.is_integer():
            return
        if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
            return
        raise ValidationRuleException(get_error_message("integer", param, name), name=name)


class StringValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is not None and not isinstance(value, str):
            raise ValidationRuleException(get_error_message("string", param, name), name=name)


class BooleanValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None or isinstance(value, bool):
            return
        if _is_number(value) and value in (0, 1):
            return
        if isinstance(value, str) and value.strip().lower() in BOOLEAN_STRINGS:
            return
        raise ValidationRuleException(get_error_message("boolean", param, name), name=name)


class InValidatorRule(ValidatorRule):
    """`in:a,b,c`. Compares the textual form of the value."""

    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        options = [option.strip() for option in param.split(",")]
        text = str(value).lower() if isinstance(value, bool) else str(value)
        if text not in options:
            raise ValidationRuleException(get_error_message("in", ", ".join(options), name), name=name)
