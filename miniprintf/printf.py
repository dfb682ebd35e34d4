"""A small printf supporting ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a format string cannot be rendered."""


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    """Yield the output of ``fmt`` piece by piece, in order."""
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # '%%' and any unknown specifier both print a single '%'
            # and swallow the character after it.
            yield "%"
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'") from None
        yield converter(value)


def format_text(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` renders to with ``args``."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write ``fmt`` rendered with ``args`` and return the characters written.

    Output is written as it is produced, so text before a malformed part of
    the format string has already been written when FormatError is raised.
    """
    out = sys.stdout if file is None else file
    count = 0
    for piece in _render(fmt, args):
        out.write(piece)
        count += len(piece)
    return count