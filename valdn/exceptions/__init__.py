"""Exceptions raised by valdn."""

from .common_exceptions import (
    ValdnException,
    ConfigurationException,
    UnknownRuleException,
    UnsupportedTypeException,
    InvalidTargetException,
    InvalidConfigException,
    PayloadDecodeException,
    ValidationRuleException,
)
from .http_exceptions import (
    HttpException,
    BadRequestException,
    UnprocessableEntityException,
)


__all__ = [
    # common
    "ValdnException",
    "ConfigurationException",
    "UnknownRuleException",
    "UnsupportedTypeException",
    "InvalidTargetException",
    "InvalidConfigException",
    "PayloadDecodeException",
    "ValidationRuleException",
    # http
    "HttpException",
    "BadRequestException",
    "UnprocessableEntityException",
]
