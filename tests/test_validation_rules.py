import pytest

from valdn import InvalidConfigException
from valdn.core.evaluator import evaluate


@pytest.mark.parametrize("value", [None, "", "   ", [], {}, ()])
def test_required_fails_on_empty(registry, value):
    assert evaluate("field", value, ["required"], registry=registry) == "field is required"


@pytest.mark.parametrize("value", [0, False, "x", [1], {"a": 1}])
def test_required_passes_on_present(registry, value):
    assert evaluate("field", value, ["required"], registry=registry) is None


def test_min_compares_numbers_by_value(registry):
    assert evaluate("age", 10, ["min:18"], registry=registry) == "age must be at least 18"
    assert evaluate("age", 18, ["min:18"], registry=registry) is None
    assert evaluate("price", 0.5, ["min:1"], registry=registry) is not None


def test_min_and_max_measure_strings_and_containers(registry):
    assert evaluate("tag", "a", ["min:2"], registry=registry) == "tag must be at least 2 characters long"
    assert evaluate("tag", "bb", ["min:2"], registry=registry) is None
    assert evaluate("tags", [1, 2, 3], ["max:2"], registry=registry) == "tags must not contain more than 2 items"
    assert evaluate("name", "abcdef", ["max:5"], registry=registry) == "name must not be longer than 5 characters"


def test_size_rules_ignore_none(registry):
    for rule in ("min:1", "max:1", "len:1", "between:1,2", "email", "numeric", "in:a"):
        assert evaluate("field", None, [rule], registry=registry) is None


def test_size_rules_reject_values_without_size(registry):
    assert evaluate("flag", True, ["min:0"], registry=registry) is not None
    assert evaluate("obj", object(), ["max:10"], registry=registry) is not None


def test_len_and_between(registry):
    assert evaluate("code", "abc", ["len:3"], registry=registry) is None
    assert evaluate("code", "ab", ["len:3"], registry=registry) == "code must be exactly 3 long"
    assert evaluate("age", 30, ["between:18,65"], registry=registry) is None
    assert evaluate("age", 70, ["between:18,65"], registry=registry) == "age must be between 18 and 65"


def test_bad_parameters_are_configuration_errors(registry):
    with pytest.raises(InvalidConfigException):
        evaluate("age", 1, ["min:abc"], registry=registry)
    with pytest.raises(InvalidConfigException):
        evaluate("age", 1, ["between:5"], registry=registry)
    with pytest.raises(InvalidConfigException):
        evaluate("code", "x", ["regex:("], registry=registry)


def test_email(registry, sample_data):
    assert evaluate("email", sample_data["email"], ["email"], registry=registry) is None
    assert evaluate("email", "not-an-email", ["email"], registry=registry) == "email must be a valid email address"
    assert evaluate("email", 42, ["email"], registry=registry) is not None


def test_regex_matches_whole_string(registry):
    assert evaluate("zip", "12345", [r"regex:\d{5}"], registry=registry) is None
    assert evaluate("zip", "123456", [r"regex:\d{5}"], registry=registry) == "zip has an invalid format"


def test_in(registry):
    assert evaluate("role", "admin", ["in:admin,user"], registry=registry) is None
    assert evaluate("role", "root", ["in:admin, user"], registry=registry) == "role must be one of: admin, user"
    assert evaluate("flag", True, ["in:true,false"], registry=registry) is None


def test_type_rules(registry):
    assert evaluate("n", "3.5", ["numeric"], registry=registry) is None
    assert evaluate("n", "abc", ["numeric"], registry=registry) == "n must be a number"
    assert evaluate("n", True, ["numeric"], registry=registry) is not None
    assert evaluate("i", "-12", ["integer"], registry=registry) is None
    assert evaluate("i", 2.0, ["integer"], registry=registry) is None
    assert evaluate("i", 2.5, ["integer"], registry=registry) == "i must be an integer"
    assert evaluate("s", 1, ["string"], registry=registry) == "s must be a string"
    assert evaluate("b", "true", ["boolean"], registry=registry) is None
    assert evaluate("b", 1, ["boolean"], registry=registry) is None
    assert evaluate("b", "maybe", ["boolean"], registry=registry) == "b must be a boolean"


def test_alpha_rules(registry):
    assert evaluate("a", "abc", ["alpha"], registry=registry) is None
    assert evaluate("a", "abc1", ["alpha"], registry=registry) == "a must contain only letters"
    assert evaluate("a", "abc1", ["alpha_num"], registry=registry) is None
    assert evaluate("a", "abc-1", ["alpha_num"], registry=registry) == "a must contain only letters and digits"


def test_root_value_is_named_value_in_messages(registry):
    assert evaluate("", None, ["required"], registry=registry) == "value is required"
