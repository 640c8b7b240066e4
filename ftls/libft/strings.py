"""String helpers with null-tolerant comparison and bounded concatenation."""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

_NUL = "\0"


def _char_code(s: str, index: int) -> int:
    """Code of the character at index, or 0 past the end like a terminator."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: Optional[str]) -> int:
    """Length of s; a missing string has length 0."""
    if s is None:
        return 0
    return len(s)


def strcmp(a: Optional[str], b: Optional[str]) -> int:
    """Difference of the first differing characters, 0 when equal.

    A missing string on either side compares as -1.
    """
    if a is None or b is None:
        return -1
    for index in range(max(len(a), len(b)) + 1):
        left = _char_code(a, index)
        right = _char_code(b, index)
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b."""
    if n <= 0:
        return 0
    index = 0
    while (
        index < n
        and _char_code(a, index) == _char_code(b, index)
        and _char_code(a, index)
    ):
        index += 1
    if index == n:
        return 0
    return _char_code(a, index) - _char_code(b, index)


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """True when both strings are present and equal."""
    if a is None or b is None:
        return False
    return a == b


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Looking for the terminator finds the position just past the end.
    """
    ch = chr(c & 0xFF) if isinstance(c, int) else c
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenation of a and b, or None when either is missing."""
    if a is None or b is None:
        return None
    return a + b


def strncat(a: str, b: str, n: int) -> str:
    """a followed by at most n characters of b."""
    return a + b[:max(n, 0)]


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full result would have.
    When size is below the length of dst, dst is left alone and the length
    reported is len(src) + size.
    """
    dst_len = len(dst)
    src_len = len(src)
    if size < dst_len:
        return dst, src_len + size
    room = max(size - dst_len - 1, 0)
    return dst + src[:room], dst_len + src_len


def strncpy(src: str, length: int) -> str:
    """Exactly length characters: src truncated, or padded with terminators."""
    if length < 0:
        raise ValueError("length must not be negative")
    copied = src[:length]
    return copied + _NUL * (length - len(copied))


def strmap(s: Optional[str], f: Optional[Callable[[str], str]]) -> Optional[str]:
    """A new string made of f applied to each character of s."""
    if s is None or f is None:
        return None
    return "".join(f(ch) for ch in s)


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """A new string of f(index, char) for each character.

    Results that are empty, None or the terminator are dropped.
    """
    if s is None or f is None:
        return None
    pieces = (f(index, ch) for index, ch in enumerate(s))
    return "".join(piece for piece in pieces if piece and piece != _NUL)


def striter(
    s: Optional[str], f: Optional[Callable[[str], Optional[str]]]
) -> Optional[str]:
    """Call f on each character; a returned character replaces it.

    Returns the string after the calls, or s unchanged when f is missing.
    """
    if s is None or f is None:
        return s
    result = []
    for ch in s:
        replacement = f(ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def striteri(
    s: Optional[str], f: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Like striter, but f also receives the character's index."""
    if s is None or f is None:
        return s
    result = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)