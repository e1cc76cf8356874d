from typing import Any, Optional

from valdn.utils.serialisation import describe_type, get_exception_error_type


class ValdnException(Exception):
    def __init__(self, message: str, *, error_type: Optional[str] = None, data: Optional[dict] = None):
        """
        Base exception for everything valdn raises, except rule failures.

        Args:
            message: The error message.
            error_type: The error type (if not provided, it will be inferred from the exception class name).
            data: Optional extra details.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)


class ConfigurationException(ValdnException):
    """
    Fatal misuse of the engine: an unregistered rule, a value breaking the
    canonical shape contract, a wrong top-level kind or a bad config.

    Never recorded in the error map. The whole validation call is aborted.
    """


class UnknownRuleException(ConfigurationException):
    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"[CONFIG] Unknown rule: `{rule_name}`")


class UnsupportedTypeException(ConfigurationException):
    def __init__(self, path: str, value: Any, reason: Optional[str] = None):
        self.path = path
        message = f"[CONFIG] Error validating `{path}`: type {describe_type(value)} is not supported"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidTargetException(ConfigurationException):
    def __init__(self, expected: str, value: Any):
        self.expected = expected
        super().__init__(f"[CONFIG] Expected {expected}, got {describe_type(value)}")


class InvalidConfigException(ConfigurationException):
    def __init__(self, message: str):
        super().__init__(f"[CONFIG] {message}")


class PayloadDecodeException(ValdnException):
    """Raised by the JSON and request collaborators before the engine runs."""


class ValidationRuleException(ValueError):
    """
    Failure signalled by a rule for a single value.

    This is the only exception the validation session catches: it is turned into
    an entry of the error map. Anything else propagates to the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        error_type: str = "value_error",
    ):
        super().__init__(message)
        self.message = message
        self.name = name
        self.error_type = error_type
