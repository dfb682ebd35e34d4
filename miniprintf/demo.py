"""Side-by-side demonstration of miniprintf against Python's ``%`` operator.

Each demo renders the same format strings twice: once with Python's built-in
``%`` formatting as a reference and once with :func:`miniprintf.printf.printf`,
so the two outputs can be compared by eye.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, TextIO

from miniprintf.printf import FormatError, printf

BLUE = "\033[0;34m"
RED = "\033[035m"
RESET = "\033[0m"
BOLD = "\033[1;37m"

REFERENCE_LABEL = f"{RED}   PYTHON %:  {RESET}"
OWN_LABEL = f"{BLUE}   MINIPRINTF:{RESET}"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

SAMPLE_TEXT = (
    "Mix sifted flour (c), sugar (s), cracked eggs (p), a dash of milk (d), "
    "soft butter (i), baking powder (u), a drop of vanilla (x) and a pinch "
    "of salt (%) until smooth, then bake until the output is just right."
)


def _heading(out: TextIO, title: str) -> None:
    out.write(f"{BOLD}{title}{RESET}\n")


def _reference(fmt: str, args: Sequence[Any]) -> str:
    """Render with Python's ``%`` operator, describing any failure instead."""
    try:
        return fmt % tuple(args)
    except (TypeError, ValueError, OverflowError) as exc:
        return f"<error: {exc}>"


def _own(out: TextIO, fmt: str, args: Sequence[Any]) -> int | None:
    """Render with miniprintf, describing any failure instead of raising."""
    try:
        return printf(fmt, *args, file=out)
    except (FormatError, TypeError, ValueError) as exc:
        out.write(f"<error: {exc}>")
        return None


def _compare(
    out: TextIO,
    body: str,
    args: Sequence[Any] = (),
    own_args: Sequence[Any] | None = None,
    width: int = 28,
) -> None:
    """Write one framed comparison of ``body`` rendered both ways."""
    rule = "-" * width + "\n"
    out.write(rule)
    reference = _reference(f"{body}", args)
    out.write(f"|{REFERENCE_LABEL}{BOLD}{reference}{RESET}|\n")
    _own(out, f"|{OWN_LABEL}{BOLD}{body}{RESET}|\n", args if own_args is None else own_args)
    out.write(rule)


def _demo_char(out: TextIO) -> None:
    _heading(out, "TEST WITH A STRING:\n")
    out.write(f"{REFERENCE_LABEL}\n")
    out.write("".join("%c" % ch for ch in SAMPLE_TEXT))
    out.write(f"\n{OWN_LABEL}\n")
    for ch in SAMPLE_TEXT:
        printf("%c", ch, file=out)
    out.write("\n")

    _heading(out, "\nTESTS WITH RANDOM DATA TYPES:\n")
    _compare(out, "%c, %c, %c   ", ("1", "1", 1), width=25)
    _compare(out, "%c, %c  ", (12345, 0), width=21)


def _demo_string(out: TextIO) -> None:
    _heading(out, "TEST WITH A STRING:\n")
    _compare(out, "%s ", (SAMPLE_TEXT,), width=28)
    _heading(out, "IF STR IS EMPTY:")
    _compare(out, "%s          ", ("",), width=23)
    _heading(out, "IF STR IS NULL:")
    _compare(out, "%s    ", (None,), width=23)
    _heading(out, "IF JUST NULL:")
    _compare(out, "%s    ", (None,), width=23)


def _demo_pointer(out: TextIO) -> None:
    local = [None]
    out.write("arg: -1\n")
    _compare(out, "%p  ", (-1,), width=28)
    out.write("arg: address of a local object\n")
    _compare(out, "%p  ", (id(local),), width=32)
    out.write("arg: null pointer\n")
    _compare(out, "%p  ", (None,), width=23)
    out.write("arg: null address 0\n")
    _compare(out, "%p  ", (0,), width=23)


def _demo_signed(spec: str, out: TextIO) -> None:
    body = f"%{spec}  "
    _heading(out, "TEST WITH INT_MIN AND INT_MAX:")
    _compare(out, body, (INT_MIN,))
    _compare(out, body, (INT_MAX,))
    _heading(out, "TEST WITH -1, 0 and 1:")
    for value in range(-1, 2):
        _compare(out, body, (value,))
    _heading(out, "TEST WITH LLONG_MIN AND LLONG_MAX:")
    _compare(out, body, (LLONG_MIN,))
    _compare(out, body, (LLONG_MAX,))


def _demo_unsigned(out: TextIO) -> None:
    _demo_signed("u", out)


def _demo_hex(spec: str, out: TextIO) -> None:
    body = f"%{spec}  "
    _heading(out, "TEST WITH VALUES: -3 TO 1:")
    for value in range(-3, 2):
        _compare(out, body, (value,), width=27)
    _heading(out, "TEST WITH LLONG_MIN:")
    _compare(out, body, (LLONG_MIN,), width=27)
    _heading(out, "TEST WITH 1234:")
    _compare(out, body, (1234,), width=27)


def _demo_percent(out: TextIO) -> None:
    _heading(out, "TEST WITH 1%:")
    _compare(out, "%  ", width=27)

    _heading(out, "TEST WITH 1% + nullchar:")
    rule = "-" * 27 + "\n"
    out.write(rule)
    out.write(f"|{REFERENCE_LABEL}{BOLD}{_reference('%', ())}")
    out.write(f"{RESET}|\n")
    _own(out, f"|{OWN_LABEL}{BOLD}%", ())
    printf(f"{RESET}|\n", file=out)
    out.write(rule)

    for count in (2, 3, 10, 23):
        _heading(out, f"TEST WITH {count}%:")
        _compare(out, "%" * count + "  ", width=27)


def _demo_return(out: TextIO) -> None:
    for title, text in (("TEST WITH A STRING:\n", SAMPLE_TEXT), ("\nTEST WITH ANOTHER STRING:\n", "hi")):
        _heading(out, title)
        reference = _reference("%s\n", (text,))
        out.write(reference)
        reference_count = len(reference)
        own_count = _own(out, "%s\n", (text,))
        _heading(out, "RETURN VALUE:")
        _compare(out, "%d  ", (reference_count,), own_args=(own_count,), width=21)


_DEMOS: dict[str, Callable[[TextIO], None]] = {
    "c": _demo_char,
    "s": _demo_string,
    "p": _demo_pointer,
    "d": partial(_demo_signed, "d"),
    "i": partial(_demo_signed, "i"),
    "u": _demo_unsigned,
    "x": partial(_demo_hex, "x"),
    "X": partial(_demo_hex, "X"),
    "%%": _demo_percent,
    "return": _demo_return,
}

DEMO_NAMES = tuple(_DEMOS)

_USAGE = (
    ("c", "%c Prints a single character."),
    ("s", "%s Prints a string."),
    ("p", "%p Prints a pointer address in hexadecimal format."),
    ("d", "%d Prints a decimal (base 10) number."),
    ("i", "%i Prints an integer in base 10."),
    ("u", "%u Prints an unsigned decimal (base 10) number."),
    ("x", "%x Prints a number in hexadecimal (base 16) lowercase format."),
    ("X", "%X Prints a number in hexadecimal (base 16) uppercase format."),
    ("%%", "%% Prints a percent sign."),
    ("return", "Prints return values."),
)


def show_usage(out: TextIO | None = None) -> None:
    """Write the list of available demos."""
    out = sys.stdout if out is None else out
    out.write("usage: miniprintf-demo SPECIFIER\n")
    out.write("\t-----------------------\n")
    out.write("\t| FORMAT SPECIFIERS:  |\n")
    out.write("\t-----------------------\n")
    for name, description in _USAGE:
        out.write(f"{BOLD}{name}: {RESET}{description}\n")


def run_demo(name: str, out: TextIO | None = None) -> None:
    """Run the demo called ``name``; raise ValueError if there is none."""
    out = sys.stdout if out is None else out
    try:
        demo = _DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo: {name!r}") from None
    demo(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: run the demo named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        show_usage()
        return 1
    try:
        run_demo(args[0])
    except ValueError:
        show_usage()
    return 0


if __name__ == "__main__":
    sys.exit(main())