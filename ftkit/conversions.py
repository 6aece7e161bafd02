"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\r\v\f"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer as a 32-bit value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit, and text with no digits gives 0. The value is built
    in 64-bit arithmetic and then narrowed to 32 bits, wrapping on overflow.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    number = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        number = _wrap(number * 10 + int(ch), 64)
    return _wrap(_wrap(number * sign, 64), 32)


def int_len(n: int) -> int:
    """Return the number of characters in the decimal form of ``n``, sign included."""
    return len(str(abs(n))) + (1 if n < 0 else 0)


def itoa(n: int) -> str:
    """Return the decimal form of a 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in 32 bits")
    return str(n)