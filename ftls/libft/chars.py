"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, low: str, high: str, offset: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _convert(c, "a", "z", ord("A") - ord("a"))