import math

import pytest

from toonenc.normalize import (
    is_array_of_arrays,
    is_array_of_objects,
    is_array_of_primitives,
    is_empty_object,
    is_json_array,
    is_json_object,
    is_json_primitive,
    normalize_json_value,
    normalize_primitive,
)


@pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_become_null(number):
    assert normalize_primitive(number) is None


def test_negative_zero_becomes_positive_zero():
    result = normalize_primitive(-0.0)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_integers_become_floats():
    result = normalize_primitive(7)
    assert isinstance(result, float)
    assert result == 7


def test_huge_integer_becomes_null():
    assert normalize_primitive(10**400) is None


@pytest.mark.parametrize("value", [True, False, None, "text", "", 1.5])
def test_other_primitives_pass_through(value):
    assert normalize_primitive(value) == value
    assert type(normalize_primitive(value)) is type(value)


def test_nested_values_are_normalised_and_order_kept():
    value = {"z": [math.nan, {"inner": -0.0}], "a": math.inf, "m": "keep"}
    result = normalize_json_value(value)
    assert list(result) == ["z", "a", "m"]
    assert result["z"][0] is None
    assert result["z"][1] == {"inner": 0.0}
    assert result["a"] is None
    assert result["m"] == "keep"


def test_normalize_does_not_change_input():
    value = {"n": [math.inf]}
    normalize_json_value(value)
    assert value["n"][0] == math.inf


def test_kind_predicates():
    assert is_json_primitive("x") and is_json_primitive(None)
    assert not is_json_primitive([]) and not is_json_primitive({})
    assert is_json_array([1.0]) and not is_json_array({})
    assert is_json_object({}) and not is_json_object([])


def test_empty_object():
    assert is_empty_object({})
    assert not is_empty_object({"a": None})


def test_array_shape_predicates():
    assert is_array_of_primitives([1.0, "a", None, True])
    assert not is_array_of_primitives([1.0, []])
    assert is_array_of_arrays([[], [1.0]])
    assert not is_array_of_arrays([[], {}])
    assert is_array_of_objects([{}, {"a": 1.0}])
    assert not is_array_of_objects([{}, None])


def test_empty_array_satisfies_every_shape():
    assert is_array_of_primitives([])
    assert is_array_of_arrays([])
    assert is_array_of_objects([])