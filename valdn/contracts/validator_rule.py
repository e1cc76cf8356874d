from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union


class ValidatorRule(ABC):
    """
    Contract for rules stored in a `RuleRegistry`.

    Implementations should raise `ValidationRuleException` on failure and return
    `None` otherwise. Instances are called like plain rule functions.
    """

    @abstractmethod
    def validate(self, *, name: str, value: Any, param: str) -> None:
        """
        Validate a single value.

        Args:
            name: Field path of the value (empty for the root).
            value: The value at that path. Composite values are passed whole.
            param: The text after `:` in the rule expression, or "" when absent.

        Raises:
            ValidationRuleException: If the validation fails.
        """
        raise NotImplementedError

    def __call__(self, name: str, value: Any, param: str) -> None:
        return self.validate(name=name, value=value, param=param)


RuleFunc = Callable[[str, Any, str], None]

Rule = Union[ValidatorRule, RuleFunc]
