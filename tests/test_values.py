from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from valdn import UnsupportedTypeException, ValueKind, classify, shape_of
from valdn.config import ValidationConfig
from valdn.core.values import iter_children


class Account(BaseModel):
    email: str = Field(json_schema_extra={"valdn": "required|email"})
    nickname: str = ""


@dataclass
class Person:
    name: str = field(metadata={"valdn": "required"})
    age: int = 0
    _secret: str = "hidden"


@pytest.mark.parametrize(
    "value, kind",
    [
        (1, ValueKind.SCALAR),
        ("text", ValueKind.SCALAR),
        (b"bytes", ValueKind.SCALAR),
        (None, ValueKind.SCALAR),
        ({"a": 1}, ValueKind.MAP),
        ([1, 2], ValueKind.COLLECTION),
        ((1, 2), ValueKind.COLLECTION),
        (Person("ann"), ValueKind.RECORD),
        (Account(email="a@b.co"), ValueKind.RECORD),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_record_classes_are_scalars():
    assert classify(Person) is ValueKind.SCALAR
    assert classify(Account) is ValueKind.SCALAR


def test_map_with_non_string_keys_is_unsupported():
    with pytest.raises(UnsupportedTypeException) as exc:
        classify({1: "a"}, "lookup")
    assert exc.value.path == "lookup"
    assert "map keys must be strings" in exc.value.message


def test_sets_are_unsupported():
    with pytest.raises(UnsupportedTypeException):
        classify({"a", "b"}, "tags")


def test_shape_of_pydantic_model():
    shape = shape_of(Account, "valdn")
    assert shape.field_names() == ["email", "nickname"]
    assert shape.fields[0].annotation == "required|email"
    assert shape.fields[1].annotation is None


def test_shape_of_dataclass_skips_private_fields():
    shape = shape_of(Person, "valdn")
    assert shape.field_names() == ["name", "age"]
    assert shape.fields[0].annotation == "required"


def test_shape_of_uses_tag_name():
    assert shape_of(Person, "rules").fields[0].annotation is None


def test_shape_of_rejects_plain_classes():
    with pytest.raises(TypeError):
        shape_of(dict, "valdn")


def test_iter_children():
    config = ValidationConfig()
    assert list(iter_children(Person("ann", 3), ValueKind.RECORD, config)) == [("name", "ann"), ("age", 3)]
    assert list(iter_children({"a": 1}, ValueKind.MAP, config)) == [("a", 1)]
    assert list(iter_children(["x", "y"], ValueKind.COLLECTION, config)) == [("0", "x"), ("1", "y")]
