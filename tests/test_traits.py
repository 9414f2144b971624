from typing import Optional

import pytest

from fieldguard.errors import ValidationError, ValidationErrors
from fieldguard.traits import Validate, ValidateArgs, has_element, length_of


def outcome(obj) -> Optional[ValidationErrors]:
    try:
        obj.validate()
    except ValidationErrors as errors:
        return errors
    return None


def outcome_args(obj, args) -> Optional[ValidationErrors]:
    try:
        obj.validate_args(args)
    except ValidationErrors as errors:
        return errors
    return None


def test_length_of_text_counts_characters():
    assert length_of("hello") == 5
    assert length_of("日本") == 2


@pytest.mark.parametrize(
    "value",
    [[1, 2, 3], (1, 2), {"a": 1, "b": 2}, {1, 2, 3, 4}, frozenset(), b"abc", ""],
)
def test_length_of_collections_matches_len(value):
    assert length_of(value) == len(value)


def test_length_of_unsized_raises():
    with pytest.raises(TypeError):
        length_of(5)


def test_has_element_in_text():
    assert has_element("hey", "e") is True
    assert has_element("hey", "o") is False


def test_has_element_in_mapping_keys():
    mapping = {"hey": 1}
    assert has_element(mapping, "hey") is True
    assert has_element(mapping, "bob") is False


def test_has_element_unsupported_raises():
    with pytest.raises(TypeError):
        has_element(42, "x")


def test_validate_is_abstract():
    with pytest.raises(TypeError):
        Validate()


def test_validate_args_is_abstract():
    with pytest.raises(TypeError):
        ValidateArgs()


class Counter:
    def __init__(self):
        self.counter = 0


class CountingStruct(ValidateArgs):
    def __init__(self, value):
        self.value = value

    def validate_args(self, args):
        counter, fail = args
        counter.counter += 1
        if fail:
            errors = ValidationErrors()
            errors.add("value", ValidationError("meh"))
            raise errors


def test_validate_args_passes_argument_through():
    counter = Counter()
    result = outcome_args(CountingStruct("Hello World"), (counter, False))
    assert ValidationErrors.has_error(result, "value") is False
    assert result is None
    assert counter.counter == 1


def test_validate_args_failure_raises_errors():
    counter = Counter()
    with pytest.raises(ValidationErrors) as info:
        CountingStruct("Hello World").validate_args((counter, True))
    assert counter.counter == 1
    assert ValidationErrors.has_error(info.value, "value") is True
    assert info.value.field_errors()["value"][0].code == "meh"


class Named(Validate):
    def __init__(self, name):
        self.name = name

    def validate(self):
        if length_of(self.name) < 1:
            errors = ValidationErrors()
            errors.add("name", ValidationError("length"))
            raise errors


def test_validate_subclass_accepts_valid_value():
    result = outcome(Named("al"))
    assert ValidationErrors.has_error(result, "name") is False
    assert result is None


def test_validate_subclass_rejects_invalid_value():
    with pytest.raises(ValidationErrors) as info:
        Named("").validate()
    assert ValidationErrors.has_error(info.value, "name") is True
    assert info.value.field_errors()["name"][0].code == "length"