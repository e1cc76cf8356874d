"""
Error message templates of the built-in rules.

Templates are formatted with `name` (field path, or "value" for the root),
`param` (rule parameter) and `value`. Unknown rules fall back to a generic
message.
"""

from typing import Any, Dict

DEFAULT_MESSAGE = "{name} is invalid"

MESSAGES: Dict[str, str] = {
    "required": "{name} is required",
    "min": "{name} must be at least {param}",
    "min.size": "{name} must contain at least {param} items",
    "min.string": "{name} must be at least {param} characters long",
    "max": "{name} must not be greater than {param}",
    "max.size": "{name} must not contain more than {param} items",
    "max.string": "{name} must not be longer than {param} characters",
    "len": "{name} must be exactly {param} long",
    "between": "{name} must be between {param}",
    "email": "{name} must be a valid email address",
    "regex": "{name} has an invalid format",
    "in": "{name} must be one of: {param}",
    "numeric": "{name} must be a number",
    "integer": "{name} must be an integer",
    "string": "{name} must be a string",
    "boolean": "{name} must be a boolean",
    "alpha": "{name} must contain only letters",
    "alpha_num": "{name} must contain only letters and digits",
}


def get_error_message(rule: str, param: str = "", name: str = "", value: Any = None) -> str:
    template = MESSAGES.get(rule, DEFAULT_MESSAGE)
    return template.format(name=name or "value", param=param, value=value)
