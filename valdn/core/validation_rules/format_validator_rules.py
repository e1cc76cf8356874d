from __future__ import annotations

import re
from typing import Any

from valdn.contracts.validator_rule import ValidatorRule
from valdn.core.messages import get_error_message
from valdn.exceptions.common_exceptions import InvalidConfigException, ValidationRuleException

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class EmailValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        if not isinstance(value, str) or EMAIL_PATTERN.fullmatch(value) is None:
            raise ValidationRuleException(get_error_message("email", param, name), name=name)


class RegexValidatorRule(ValidatorRule):
    """`regex:<pattern>`. The whole string must match."""

    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        try:
            pattern = re.compile(param)
        except re.error as e:
            raise InvalidConfigException(f"Rule `regex` has an invalid pattern `{param}`: {e}") from e
        if not isinstance(value, str) or pattern.fullmatch(value) is None:
            raise ValidationRuleException(get_error_message("regex", param, name), name=name)


class AlphaValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        if not isinstance(value, str) or not value.isalpha():
            raise ValidationRuleException(get_error_message("alpha", param, name), name=name)


class AlphaNumValidatorRule(ValidatorRule):
    def validate(self, *, name: str, value: Any, param: str) -> None:
        if value is None:
            return
        if not isinstance(value, str) or not value.isalnum():
            raise ValidationRuleException(get_error_message("alpha_num", param, name), name=name)
