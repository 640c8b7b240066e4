"""Byte-buffer helpers operating on bytearray objects in place."""

from __future__ import annotations

from typing import Optional


def _check_range(name: str, buf_len: int, end: int) -> None:
    if end > buf_len:
        raise IndexError(f"{name}: range end {end} exceeds buffer length {buf_len}")


def memalloc(size: int) -> bytearray:
    """A new zero-filled buffer of the given size."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf and return it."""
    return memset(buf, 0, n)


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first length bytes of buf with the low byte of value."""
    _check_range("memset", len(buf), length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into dst and return dst."""
    _check_range("memcpy", len(src), n)
    _check_range("memcpy", len(dst), n)
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes, c: int, n: int) -> Optional[int]:
    """Copy up to n bytes, stopping after the first byte equal to c.

    Returns the index in dst just past the copied c, or None if c was not met.
    """
    stop = c & 0xFF
    for index, byte in enumerate(src[:n]):
        _check_range("memccpy", len(dst), index + 1)
        dst[index] = byte
        if byte == stop:
            return index + 1
    _check_range("memccpy", len(src), n)
    return None


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move length bytes within buf from offset src to offset dst; overlap is safe."""
    _check_range("memmove", len(buf), src + length)
    _check_range("memmove", len(buf), dst + length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n, or None."""
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 when equal."""
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0