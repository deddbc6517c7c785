"""Small text helpers used by the shell: splitting, number parsing, trimming."""

from __future__ import annotations

_INT_BITS = 32
_INT_MODULUS = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    return (value - _INT_MIN) % _INT_MODULUS + _INT_MIN


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps around like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not is_ascii_digit(char):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters of two strings.

    Returns 0 when they match, otherwise the difference between the codes of
    the first differing characters. The end of a string compares as code 0.
    """
    for index in range(length):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def find_within(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first occurrence, 0 for an empty needle, or
    None when there is no match.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def is_ascii_digit(char: str | int) -> bool:
    """Tell whether ``char`` (a character or a character code) is 0-9."""
    if isinstance(char, int):
        return ord("0") <= char <= ord("9")
    return len(char) == 1 and "0" <= char <= "9"


def is_numeric(text: str) -> bool:
    """Tell whether every character of ``text`` is an ASCII digit.

    The empty string counts as numeric.
    """
    return all(is_ascii_digit(char) for char in text)