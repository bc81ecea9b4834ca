"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits yields 0. The result
    wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    return str(_to_int32(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    index = haystack[:max(n, 0)].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells how ``a`` orders against ``b``.

    The end of a string compares as a zero character.
    """
    if n <= 0:
        return 0
    for left, right in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 1:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the result was meant to have:
    ``len(src)`` plus the smaller of ``size`` and ``len(dest)``.
    """
    room = max(size - len(dest) - 1, 0)
    return dest + src[:room], len(src) + min(size, len(dest))