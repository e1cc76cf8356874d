"""Core utilities re-exported for convenient access.

These modules provide the validation engine itself.
"""

from .api import *  # noqa: F401,F403
from .evaluator import evaluate, split_rule, validate  # noqa: F401
from .messages import MESSAGES, get_error_message  # noqa: F401
from .registry import RuleRegistry, default_registry, get_registry  # noqa: F401
from .session import Errors, Rules, ValidationSession  # noqa: F401
from .shapes import FieldShape, RecordShape, shape_of  # noqa: F401
from .values import ValueKind, classify  # noqa: F401
from .validation_rules import *  # noqa: F401,F403
