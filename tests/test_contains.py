import pytest

from fieldguard.contains import validate_contains, validate_does_not_contain


def test_contains_string():
    assert validate_contains("hey", "e") is True


def test_contains_string_can_fail():
    assert validate_contains("hey", "o") is False


def test_contains_mapping_key():
    assert validate_contains({"hey": 1}, "hey") is True


def test_contains_mapping_key_can_fail():
    assert validate_contains({"hey": 1}, "bob") is False


def test_contains_mapping_looks_at_keys_not_values():
    assert validate_contains({"a": "hey"}, "hey") is False


def test_contains_empty_string():
    assert validate_contains("", "he") is False


def test_does_not_contain_string():
    assert validate_does_not_contain("hey", "e") is False


def test_does_not_contain_string_can_fail():
    assert validate_does_not_contain("hey", "o") is True


def test_does_not_contain_mapping_key():
    assert validate_does_not_contain({"hey": 1}, "hey") is False


def test_does_not_contain_mapping_key_can_fail():
    assert validate_does_not_contain({"hey": 1}, "bob") is True


@pytest.mark.parametrize("bad", [42, ["hey"], None])
def test_unsupported_types_raise(bad):
    with pytest.raises(TypeError):
        validate_contains(bad, "hey")
    with pytest.raises(TypeError):
        validate_does_not_contain(bad, "hey")