"""Conversions between integers and decimal text, with 32-bit int semantics."""

from __future__ import annotations

_WHITESPACE = "\n \t\r\v\f"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; the result wraps like a 32-bit int.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int(number * sign)


def itoa(n: int) -> str:
    """Render an integer as decimal text."""
    return str(n)


def int_len(n: int) -> int:
    """Number of characters needed to print n, including a minus sign."""
    count = 1 if n < 0 else 0
    n = abs(n)
    while n >= 10:
        n //= 10
        count += 1
    return count + 1