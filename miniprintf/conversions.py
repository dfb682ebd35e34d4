"""Renderers for the individual conversion specifiers.

Each function turns one argument into the exact text that its specifier
produces. Integer arguments are reduced to the width of the C type that the
specifier reads: 32 bits for ``%d``, ``%i``, ``%u``, ``%x`` and ``%X``, and
64 bits for ``%p``. Larger values wrap around instead of raising.
"""

from __future__ import annotations

_INT_BITS = 32
_POINTER_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << _POINTER_BITS) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _require_int(value: object, spec: str) -> int:
    # bool is an int subclass, which is acceptable here, as it is for %d in C.
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def format_char(value: int | str) -> str:
    """Render ``%c``: the low byte of an int, or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def format_string(value: str | None) -> str:
    """Render ``%s``; ``None`` is shown as ``(null)``."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def format_pointer(address: int | None) -> str:
    """Render ``%p``: ``0x`` and lowercase hex, or ``(nil)`` for a null address."""
    if address is None:
        return NULL_POINTER
    bits = _require_int(address, "p") & _POINTER_MASK
    if bits == 0:
        return NULL_POINTER
    return f"0x{bits:x}"


def format_signed(value: int) -> str:
    """Render ``%d`` and ``%i``: a signed 32-bit decimal."""
    bits = _require_int(value, "d") & _UINT_MASK
    if bits >= 1 << (_INT_BITS - 1):
        bits -= 1 << _INT_BITS
    return str(bits)


def format_unsigned(value: int) -> str:
    """Render ``%u``: an unsigned 32-bit decimal."""
    return str(_require_int(value, "u") & _UINT_MASK)


def format_hex(value: int, upper: bool) -> str:
    """Render ``%x`` (lowercase) or ``%X`` (uppercase): unsigned 32-bit hex."""
    bits = _require_int(value, "x") & _UINT_MASK
    return format(bits, "X" if upper else "x")