"""String helpers used to parse commands and search environment entries."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C ``atoi`` style.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. A string without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def strtrim(text: str, charset: str) -> str:
    """Remove leading and trailing characters that appear in ``charset``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    _check_non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the code-point difference at the first mismatch, where the end of
    a string counts as code point 0, or 0 when the prefixes are equal.
    """
    _check_non_negative("limit", limit)
    for a, b in zip_longest(first[:limit], second[:limit], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, keeping room for a terminator.

    Returns the copied text and the full length of ``src``; a result shorter
    than ``src`` means it was truncated.
    """
    _check_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer it is left unchanged and
    the reported length is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)