import pytest

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
)


def test_char_from_int():
    assert format_char(ord("1")) == "1"


def test_char_from_str():
    assert format_char("a") == "a"


def test_char_uses_low_byte():
    assert format_char(ord("A") + 256) == "A"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_char_rejects_other_types():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_string_passthrough():
    assert format_string("hello") == "hello"
    assert format_string("") == ""


def test_string_none():
    assert format_string(None) == "(null)"


def test_string_rejects_int():
    with pytest.raises(TypeError):
        format_string(12345)


def test_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x10, 0xDEADBEEF, 0x7FFC12345678])
def test_pointer_matches_builtin_hex(address):
    assert format_pointer(address) == hex(address)


def test_pointer_minus_one_is_all_ones():
    text = format_pointer(-1)
    assert text.startswith("0x")
    assert set(text[2:]) == {"f"}
    assert len(text[2:]) == 16


@pytest.mark.parametrize("value", [-1, 0, 1, 2147483647, -2147483648])
def test_signed_in_range(value):
    assert format_signed(value) == str(value)


def test_signed_wraps_to_32_bits():
    assert format_signed(2**31) == format_signed(-(2**31))
    assert format_signed(2**32 + 7) == format_signed(7)


def test_signed_llong_limits_take_low_bits():
    assert format_signed(-(2**63)) == "0"
    assert format_signed(2**63 - 1) == "-1"


@pytest.mark.parametrize("value", [0, 1, 42, 2147483647])
def test_unsigned_in_range(value):
    assert format_unsigned(value) == str(value)


def test_unsigned_negative_wraps():
    assert format_unsigned(-1) == format_unsigned(2**32 - 1)
    assert int(format_unsigned(-1)) == int(format_hex(-1, False), 16)
    assert int(format_unsigned(-2147483648)) == 2147483648


@pytest.mark.parametrize("value", [0, 1, 1234, 0xABCDEF, 2**32 - 1])
def test_hex_lower_matches_builtin(value):
    assert format_hex(value, False) == format(value, "x")


@pytest.mark.parametrize("value", [0, 1, 1234, 0xABCDEF, 2**32 - 1])
def test_hex_upper_matches_builtin(value):
    assert format_hex(value, True) == format(value, "X")


@pytest.mark.parametrize("value", [-3, -2, -1, -(2**63)])
def test_hex_case_variants_agree(value):
    assert format_hex(value, True) == format_hex(value, False).upper()


def test_hex_negative_is_32_bit():
    assert len(format_hex(-1, False)) == 8
    assert set(format_hex(-1, False)) == {"f"}


def test_hex_zero():
    assert format_hex(0, True) == "0"


def test_hex_rejects_str():
    with pytest.raises(TypeError):
        format_hex("12", False)