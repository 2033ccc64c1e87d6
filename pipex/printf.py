"""A small printf supporting the %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_CONVERSIONS = frozenset("csdiuxXp")
_INT_BITS = 32


def _as_signed(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def _as_unsigned(value: int) -> int:
    return value % (1 << _INT_BITS)


def _require_int(conversion: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} needs an int, got {type(value).__name__}"
        )
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value
    else:
        address = id(value)
    if address < 0:
        raise ValueError("a pointer address must not be negative")
    return f"0x{address:x}"


def _convert(conversion: str, value: Any) -> str:
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "c":
        return _format_char(value)
    if conversion in ("d", "i"):
        return str(_as_signed(_require_int(conversion, value)))
    if conversion == "u":
        return str(_as_unsigned(_require_int(conversion, value)))
    if conversion == "x":
        return f"{_as_unsigned(_require_int(conversion, value)):x}"
    if conversion == "X":
        return f"{_as_unsigned(_require_int(conversion, value)):X}"
    return _format_pointer(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Integers are treated as 32-bit C ints. An unknown conversion produces
    nothing and consumes no argument; a lone ``%`` at the end is kept.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            pieces.append("%")
        elif conversion == "%":
            pieces.append("%")
        elif conversion in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            pieces.append(_convert(conversion, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)