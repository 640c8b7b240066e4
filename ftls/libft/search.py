"""Searching, slicing, trimming and splitting of strings."""

from __future__ import annotations

from typing import List, Optional, Union

_NUL = "\0"
_BLANKS = " \n\t"


def _single_char(c: Union[str, int], what: str) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"{what}: expected a single character, got {c!r}")
    return c


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """True when the first n characters of a and b are equal.

    A missing string on either side never compares equal. A negative n
    places no bound on the comparison.
    """
    if a is None or b is None:
        return False
    if n < 0:
        return a == b
    return a[:n] == b[:n]


def strnew(size: int) -> str:
    """A new string of size terminator characters."""
    if size < 0:
        raise ValueError("size must not be negative")
    return _NUL * size


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of needle in haystack, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like strstr, but the match must end within the first length characters.

    A negative length places no bound on the search.
    """
    if not needle:
        return 0
    window = haystack if length < 0 else haystack[:length]
    index = window.find(needle)
    return None if index < 0 else index


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Looking for the terminator finds the position just past the end.
    """
    ch = _single_char(c, "strrchr")
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of s beginning at start; None for a missing s."""
    if s is None:
        return None
    if start < 0 or start > len(s):
        raise IndexError(f"strsub: start {start} outside string of length {len(s)}")
    if length < 0:
        raise ValueError("length must not be negative")
    return s[start:start + length]


def strtrim(s: Optional[str]) -> Optional[str]:
    """s without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return s.strip(_BLANKS)


def strtrim_char(s: Optional[str], c: str) -> Optional[str]:
    """s without leading and trailing runs of the character c."""
    if s is None:
        return None
    return s.strip(_single_char(c, "strtrim_char"))


def count_words(s: str, delimiter: str) -> int:
    """Number of non-empty pieces of s separated by runs of delimiter."""
    delimiter = _single_char(delimiter, "count_words")
    return sum(1 for piece in s.split(delimiter) if piece)


def char_count(s: str, c: str) -> int:
    """Number of occurrences of the character c in s."""
    return s.count(_single_char(c, "char_count"))


def skip_char(s: str, trigger: str) -> str:
    """s with its leading run of trigger characters removed."""
    return s.lstrip(_single_char(trigger, "skip_char"))


def strsplit(s: Optional[str], delimiter: str) -> Optional[List[str]]:
    """Non-empty pieces of s separated by runs of delimiter; None for a missing s."""
    if s is None:
        return None
    delimiter = _single_char(delimiter, "strsplit")
    return [piece for piece in s.split(delimiter) if piece]