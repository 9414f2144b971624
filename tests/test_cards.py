import pytest

from fieldguard.cards import validate_credit_card

# Well-known documentation numbers, built from parts.
VISA_SAMPLE = "4" + "1" * 15
AMEX_SAMPLE = "37" + "8282246" + "310005"


def test_sample_visa_is_valid():
    assert validate_credit_card(VISA_SAMPLE) is True


def test_sample_amex_is_valid():
    assert validate_credit_card(AMEX_SAMPLE) is True


def test_changed_check_digit_is_invalid():
    assert validate_credit_card(VISA_SAMPLE[:-1] + "2") is False


def test_letters_are_invalid():
    assert validate_credit_card("zduhefljsdfKJKJZHUI") is False
    assert validate_credit_card("bob") is False


def test_wrong_length_for_issuer_is_invalid():
    assert validate_credit_card(VISA_SAMPLE + "1") is False


def test_too_short_is_invalid():
    assert validate_credit_card("0") is False
    assert validate_credit_card("") is False


def test_unknown_prefix_is_invalid():
    assert validate_credit_card("9" + "0" * 15) is False


def test_non_string_raises():
    with pytest.raises(TypeError):
        validate_credit_card(4111)