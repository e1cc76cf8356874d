"""Contract classes and abstract interfaces.

These are exported so they can be imported directly from :mod:`valdn`.
"""

from .validator_rule import Rule, RuleFunc, ValidatorRule

__all__ = [
    "Rule",
    "RuleFunc",
    "ValidatorRule",
]
