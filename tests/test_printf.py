import io

import pytest

from miniprintf.printf import FormatError, format_text, printf


def test_plain_text_unchanged():
    assert format_text("hi\n") == "hi\n"


def test_percent_escape():
    assert format_text("%%") == "%"
    assert format_text("%%%%%%%%%%") == "%" * 5


def test_unknown_specifier_prints_percent_and_skips_char():
    assert format_text("a%zb") == "a%b"
    assert format_text("%  |") == "% |"


def test_odd_percent_run_swallows_next_char():
    assert format_text("%%%  |") == "%% |"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_text("abc%")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_text("%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_text("%d and %d", 1)


def test_extra_arguments_ignored():
    assert format_text("%d", 7, 8, 9) == "7"


def test_mixed_conversions():
    text = format_text("%c|%s|%d|%i|%u|%x|%X", "A", "str", -5, 6, 7, 255, 255)
    assert text == "A|str|-5|6|7|ff|FF"


def test_null_string_and_pointer():
    assert format_text("%s %p", None, None) == "(null) (nil)"


def test_pointer_conversion():
    assert format_text("%p", 0x1234) == hex(0x1234)


def test_argument_types_are_checked():
    with pytest.raises(TypeError):
        format_text("%d", "12")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s\n", "hello", file=out)
    assert out.getvalue() == "hello\n"
    assert count == len("hello\n")


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (-2147483648,)),
        ("%u|%x", (-1, -1)),
        ("%s", (None,)),
        ("%c%c", ("x", 0)),
        ("%%%%", ()),
    ],
)
def test_printf_count_matches_text(fmt, args):
    out = io.StringIO()
    count = printf(fmt, *args, file=out)
    assert out.getvalue() == format_text(fmt, *args)
    assert count == len(out.getvalue())


def test_printf_nul_char_counted():
    out = io.StringIO()
    assert printf("%c", 0, file=out) == 1
    assert out.getvalue() == "\0"


def test_printf_partial_output_before_error():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc%", file=out)
    assert out.getvalue() == "abc"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%d-%s", 3, "ok")
    assert capsys.readouterr().out == "3-ok"
    assert count == len("3-ok")