from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from valdn.contracts.validator_rule import ValidatorRule
from valdn.core.messages import get_error_message
from valdn.exceptions.common_exceptions import ValidationRuleException


def is_empty(value: Any) -> bool:
    """None, blank strings and empty containers count as missing. `0` and `False` do not."""
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return len(value.strip()) == 0
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


class RequiredValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if is_empty(value):
            raise ValidationRuleException(get_error_message("required", param, name), name=name)
