"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any, Callable, TextIO

_UINT_MODULUS = 1 << 32
_INT_MIN = -(1 << 31)
_ULONG_MODULUS = 1 << 64

_FORMAT_PIECE = re.compile(r"%(.)|%$|[^%]+", re.DOTALL)


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, int):
        return int(value)
    raise TypeError(f"%{conversion} expects an integer, got {type(value).__name__}")


def _signed(value: Any, conversion: str) -> str:
    number = _as_int(value, conversion)
    number = (number - _INT_MIN) % _UINT_MODULUS + _INT_MIN
    return str(number)


def _unsigned(value: Any, conversion: str) -> int:
    return _as_int(value, conversion) % _UINT_MODULUS


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") % 256)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _ULONG_MODULUS
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "d": lambda value: _signed(value, "d"),
    "i": lambda value: _signed(value, "i"),
    "s": _string,
    "p": _pointer,
    "u": lambda value: str(_unsigned(value, "u")),
    "x": lambda value: format(_unsigned(value, "x"), "x"),
    "X": lambda value: format(_unsigned(value, "X"), "X"),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    for match in _FORMAT_PIECE.finditer(fmt):
        conversion = match.group(1)
        piece = match.group(0)
        if not piece.startswith("%") or conversion is None:
            # Plain text, or a lone '%' at the very end of the format.
            yield piece
        elif conversion == "%":
            yield "%"
        elif conversion in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string (%{conversion})"
                ) from None
            yield _CONVERSIONS[conversion](value)
        # Unknown conversions produce no output and consume no argument.


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_render(fmt, args))


def print_formatted(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)