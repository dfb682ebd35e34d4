# miniprintf

A compact printf-style formatter with a deliberately small set of conversions:

| Conversion | Output |
|------------|--------|
| `%c` | a single character: a one-character string as is, or the low byte of an int |
| `%s` | a string; `None` prints as `(null)` |
| `%p` | an address in lowercase hexadecimal with a `0x` prefix, taken as 64 bits; `None` or 0 prints as `(nil)` |
| `%d`, `%i` | a signed 32-bit decimal integer |
| `%u` | an unsigned 32-bit decimal integer |
| `%x`, `%X` | an unsigned 32-bit integer in lower- or upper-case hexadecimal |
| `%%` | a literal percent sign |

Integers wider than the conversion's width wrap around rather than raising,
so `%u` of `-1` is `4294967295` and `%d` of `2**31` is `-2147483648`.

If `%` is followed by any other character, a single `%` is written and that
character is skipped. No flags, widths or precisions are understood.

## Errors

- A format string that ends in a lone `%` raises `FormatError`.
- A conversion with no argument left for it raises `FormatError`.
- An argument of the wrong type raises `TypeError` (for example a `str` for
  `%d`), and `%c` given a string that is not exactly one character raises
  `ValueError`.
- Arguments left over after the format string is used up are ignored.

`FormatError` is a subclass of `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from miniprintf.printf import format_text, printf, FormatError

format_text("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

format_text("%u", -1)
# '4294967295'

count = printf("hello %s\n", "world")   # writes to stdout, returns 12

try:
    format_text("100%")
except FormatError:
    ...
```

`printf` takes a `file` keyword argument to write somewhere other than
standard output, and returns the number of characters written. Output is
written piece by piece, so text that comes before an error in the format
string has already been written when the exception is raised.

The single-conversion helpers live in `miniprintf.conversions`:
`format_char`, `format_string`, `format_pointer`, `format_signed`,
`format_unsigned` and `format_hex(value, upper)`.

## Demonstration

The `miniprintf-demo` command renders a set of sample formats twice, once
with Python's own `%` operator and once with `miniprintf`, so the output can
be compared by eye. It takes exactly one argument naming the demo:

```
miniprintf-demo c
miniprintf-demo s
miniprintf-demo p
miniprintf-demo d
miniprintf-demo i
miniprintf-demo u
miniprintf-demo x
miniprintf-demo X
miniprintf-demo %%
miniprintf-demo return
```

The percent demo is named by the two characters `%%`. The `return` demo
compares the character counts of the two renderings. With no argument the
command prints the list of demos and exits with status 1; with an unknown
argument it prints the same list and exits with status 0.

From Python, `miniprintf.demo.run_demo(name, out)` runs a demo into any text
stream (raising `ValueError` for an unknown name) and
`miniprintf.demo.show_usage(out)` writes the list.

## Running the tests

```
pip install .[test]
pytest
```