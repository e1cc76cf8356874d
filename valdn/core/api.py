from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from quart import Quart, g

from valdn.config import ValidationConfig
from valdn.core.evaluator import validate
from valdn.core.registry import RuleRegistry
from valdn.core.session import Errors, RulesInput, ValidationSession
from valdn.core.shapes import is_record
from valdn.core.values import TEXT_TYPES
from valdn.exceptions.common_exceptions import InvalidTargetException, PayloadDecodeException
from valdn.exceptions.http_exceptions import BadRequestException, HttpException, UnprocessableEntityException
from valdn.utils.json_utils import parse_json
from valdn.utils.request_utils import query_to_map, request_to_map

__all__ = [
    "validate",
    "validate_value",
    "validate_struct",
    "validate_map",
    "validate_slice",
    "validate_json",
    "validate_request",
    "validate_query",
    "require_valid_request",
    "require_valid_query",
    "register_error_handlers",
]


def validate_value(
    val: Any,
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """Validate a value of any kind. The root itself is governed by the `""` entry."""
    return ValidationSession(rules, registry=registry, config=config).run(val)


def validate_struct(
    val: Any,
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """
    Validate a pydantic model or dataclass instance and its nested fields.

    Field annotations are used for every path without an explicit rule. When a
    field fails, its remaining rules are skipped; when a container fails, its
    nested fields are not validated.

    Raises:
        InvalidTargetException: If `val` is not a record.
        ConfigurationException: On unknown rules or unsupported nested values.
    """
    if not is_record(val):
        raise InvalidTargetException("a pydantic model or dataclass instance", val)
    return validate_value(val, rules, registry=registry, config=config)


def validate_map(
    val: Mapping,
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """Validate a mapping with string keys and its nested values."""
    if not isinstance(val, Mapping):
        raise InvalidTargetException("a mapping", val)
    return validate_value(val, rules, registry=registry, config=config)


def validate_slice(
    val: Sequence,
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """Validate a list or tuple and its nested values. Elements are addressed by index."""
    if isinstance(val, TEXT_TYPES) or not isinstance(val, Sequence):
        raise InvalidTargetException("a list or tuple", val)
    return validate_value(val, rules, registry=registry, config=config)


def validate_json(
    val: str | bytes,
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """
    Decode a JSON object and validate it.

    Raises:
        PayloadDecodeException: If `val` is not valid JSON.
        InvalidTargetException: If the document is not a JSON object.
    """
    data = parse_json(val)
    if not isinstance(data, dict):
        raise InvalidTargetException("a JSON object", data)
    return validate_map(data, rules, registry=registry, config=config)


async def validate_request(
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """
    Validate query parameters and body of the current request.

    JSON, url-encoded and multipart bodies are supported. Must be called inside
    a request context.

    Raises:
        PayloadDecodeException: If the body does not match its content type.
    """
    data = await request_to_map()
    return validate_map(data, rules, registry=registry, config=config)


async def validate_query(
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> Errors:
    """Validate the query parameters of the current request."""
    data = await query_to_map()
    return validate_map(data, rules, registry=registry, config=config)


async def require_valid_request(
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> dict:
    """Validate the request and store the decoded data in `g.validated`.

    Returns:
        The decoded request data.

    Raises:
        UnprocessableEntityException: If the request is invalid.
        BadRequestException: If the body could not be decoded.
    """
    try:
        data = await request_to_map()
    except PayloadDecodeException as e:
        raise BadRequestException(error_type=e.error_type, message=e.message)

    errors = validate_map(data, rules, registry=registry, config=config)
    if errors:
        raise UnprocessableEntityException(error_type="invalid_request", message="The given data was invalid.", data=errors)
    g.validated = data
    return data


async def require_valid_query(
    rules: Optional[RulesInput] = None,
    *,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
) -> dict:
    """Validate the query parameters and store them in `g.validated_query`."""
    data = await query_to_map()
    errors = validate_map(data, rules, registry=registry, config=config)
    if errors:
        raise UnprocessableEntityException(error_type="invalid_query", message="The given query was invalid.", data=errors)
    g.validated_query = data
    return data


def register_error_handlers(app: Quart) -> None:
    """Render `HttpException` as a JSON response: {"error_type", "message", "data"}."""

    async def handle_http_exception(e: HttpException):
        return e.to_response()

    app.register_error_handler(HttpException, handle_http_exception)
