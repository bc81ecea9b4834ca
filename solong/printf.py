"""A small printf-style formatter supporting the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_INT_MIN = -2147483648
_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def format_number(n: int) -> str:
    """Render a decimal number; anything at or below INT_MIN renders as INT_MIN."""
    if n <= _INT_MIN:
        return "-2147483648"
    return str(n)


def format_hex(value: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit value in hexadecimal without a prefix."""
    return format(value & _UINT_MASK, "X" if upper else "x")


def format_pointer(address: int) -> str:
    """Render an address as ``0x...``, or ``(nil)`` for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format(address, "x")


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(int(arg) % 256)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(arg)
    if conversion == "s":
        return "(null)" if arg is None else str(arg)
    if conversion == "p":
        return format_pointer(0 if arg is None else int(arg))
    if conversion in "di":
        return format_number(_to_int32(int(arg)))
    if conversion == "u":
        return format_number(int(arg) & _UINT_MASK)
    return format_hex(int(arg), upper=conversion == "X")


def cformat(fmt: str | None, *args: Any) -> str:
    """Expand ``fmt`` with ``args``; unknown conversions produce nothing."""
    if fmt is None:
        return ""
    remaining = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        parts.append(_convert(conversion, remaining))
    return "".join(parts)


def print_formatted(fmt: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded format to ``file`` (stdout by default); return characters written."""
    text = cformat(fmt, *args)
    if text:
        (file if file is not None else sys.stdout).write(text)
    return len(text)