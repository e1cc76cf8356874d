"""Built-in rules loaded into `default_registry()`."""

from typing import Dict

from valdn.contracts.validator_rule import Rule

from .format_validator_rules import AlphaNumValidatorRule, AlphaValidatorRule, EmailValidatorRule, RegexValidatorRule
from .required_validator_rule import RequiredValidatorRule, is_empty
from .size_validator_rules import BetweenValidatorRule, LenValidatorRule, MaxValidatorRule, MinValidatorRule
from .type_validator_rules import (
    BooleanValidatorRule,
    InValidatorRule,
    IntegerValidatorRule,
    NumericValidatorRule,
    StringValidatorRule,
)

BUILTIN_RULES: Dict[str, Rule] = {
    "required": RequiredValidatorRule(),
    "min": MinValidatorRule(),
    "max": MaxValidatorRule(),
    "len": LenValidatorRule(),
    "between": BetweenValidatorRule(),
    "email": EmailValidatorRule(),
    "regex": RegexValidatorRule(),
    "alpha": AlphaValidatorRule(),
    "alpha_num": AlphaNumValidatorRule(),
    "numeric": NumericValidatorRule(),
    "integer": IntegerValidatorRule(),
    "string": StringValidatorRule(),
    "boolean": BooleanValidatorRule(),
    "in": InValidatorRule(),
}

__all__ = [
    "BUILTIN_RULES",
    "is_empty",
    "RequiredValidatorRule",
    "MinValidatorRule",
    "MaxValidatorRule",
    "LenValidatorRule",
    "BetweenValidatorRule",
    "EmailValidatorRule",
    "RegexValidatorRule",
    "AlphaValidatorRule",
    "AlphaNumValidatorRule",
    "NumericValidatorRule",
    "IntegerValidatorRule",
    "StringValidatorRule",
    "BooleanValidatorRule",
    "InValidatorRule",
]
