"""
Static shape descriptions of record types.

A record is a pydantic model or dataclass instance. For every record type we
build, once per tag name, the ordered list of its accessible fields together
with their rule annotation:

    class Signup(BaseModel):
        email: str = Field(json_schema_extra={"valdn": "required|email"})

    @dataclass
    class Person:
        age: int = field(metadata={"valdn": "required|min:18"})

Fields whose names start with `_` are not accessible and never validated.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldShape:
    name: str
    annotation: Optional[str] = None


@dataclass(frozen=True)
class RecordShape:
    type_name: str
    fields: tuple[FieldShape, ...]

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


def is_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def _annotation_from_extra(extra: Any, tag_name: str) -> Optional[str]:
    if isinstance(extra, dict):
        annotation = extra.get(tag_name)
        if isinstance(annotation, str):
            return annotation
    return None


def _pydantic_shape(cls: type[BaseModel], tag_name: str) -> RecordShape:
    fields = tuple(
        FieldShape(name, _annotation_from_extra(info.json_schema_extra, tag_name))
        for name, info in cls.model_fields.items()
        if not name.startswith("_")
    )
    return RecordShape(cls.__name__, fields)


def _dataclass_shape(cls: type, tag_name: str) -> RecordShape:
    fields = tuple(
        FieldShape(f.name, _annotation_from_extra(dict(f.metadata), tag_name))
        for f in dataclasses.fields(cls)
        if not f.name.startswith("_")
    )
    return RecordShape(cls.__name__, fields)


@lru_cache(maxsize=None)
def shape_of(cls: type, tag_name: str) -> RecordShape:
    """
    Describe a record type.

    Args:
        cls: A pydantic model class or dataclass.
        tag_name: Key holding rule annotations in field metadata.

    Raises:
        TypeError: If `cls` is not a record type.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return _pydantic_shape(cls, tag_name)
    if dataclasses.is_dataclass(cls):
        return _dataclass_shape(cls, tag_name)
    raise TypeError(f"{cls!r} is not a pydantic model or dataclass")
