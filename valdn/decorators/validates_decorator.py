from functools import wraps
from typing import Callable, Optional

from valdn.config import ValidationConfig
from valdn.core.api import require_valid_query, require_valid_request
from valdn.core.registry import RuleRegistry
from valdn.core.session import RulesInput


def validates(
    rules: RulesInput,
    *,
    query: bool = False,
    registry: Optional[RuleRegistry] = None,
    config: Optional[ValidationConfig] = None,
):
    """
    Decorator validating the request before a Quart handler runs.

    Usage:
        @validates({"email": ["required", "email"], "tags.*": ["min:2"]})
        async def create_user():
            data = g.validated
            ...

    On failure an `UnprocessableEntityException` is raised; register
    `register_error_handlers(app)` to turn it into a 422 JSON response.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            if query:
                await require_valid_query(rules, registry=registry, config=config)
            else:
                await require_valid_request(rules, registry=registry, config=config)
            return await func(*args, **kwargs)

        return wrapper

    return decorator
