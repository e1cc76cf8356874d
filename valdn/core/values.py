from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Iterator

from valdn.config import ValidationConfig
from valdn.core.shapes import is_record, shape_of
from valdn.exceptions.common_exceptions import UnsupportedTypeException

TEXT_TYPES = (str, bytes, bytearray)


class ValueKind(str, Enum):
    SCALAR = "scalar"
    RECORD = "record"
    MAP = "map"
    COLLECTION = "collection"

    @property
    def is_composite(self) -> bool:
        return self is not ValueKind.SCALAR


def classify(value: Any, path: str = "") -> ValueKind:
    """
    Map a native value to its kind.

    Maps must have string keys and collections must be ordered. A value that
    breaks this contract is a configuration error, not a validation failure.

    Raises:
        UnsupportedTypeException: For maps with non-string keys and for sets.
    """
    if is_record(value):
        return ValueKind.RECORD
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise UnsupportedTypeException(path, value, f"map keys must be strings, found {type(key).__name__}")
        return ValueKind.MAP
    if isinstance(value, TEXT_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Sequence):
        return ValueKind.COLLECTION
    if isinstance(value, Set):
        raise UnsupportedTypeException(path, value, "unordered collections cannot be addressed by index")
    return ValueKind.SCALAR


def iter_children(value: Any, kind: ValueKind, config: ValidationConfig) -> Iterator[tuple[str, Any]]:
    """Yield (name, child) of a composite value: record fields, map entries or indexed elements."""
    if kind is ValueKind.RECORD:
        for field in shape_of(type(value), config.tag_name).fields:
            yield field.name, getattr(value, field.name, None)
    elif kind is ValueKind.MAP:
        yield from value.items()
    elif kind is ValueKind.COLLECTION:
        for idx, item in enumerate(value):
            yield str(idx), item
