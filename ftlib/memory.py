"""Byte buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

import sys

__all__ = [
    "bzero",
    "memset",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
    "realloc",
    "bit_string",
    "memprint",
]


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError("byte count must be non-negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("byte count exceeds buffer size")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_count(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    _check_count(n, dst, src)
    if dst is not src:
        dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes, c: int, n: int) -> int | None:
    """Copy bytes of ``src`` to ``dst`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or None when ``c`` was not met within ``n`` bytes.
    """
    _check_count(n, dst, src)
    stop = bytes(src[:n]).find(c & 0xFF)
    count = n if stop < 0 else stop + 1
    dst[:count] = src[:count]
    return None if stop < 0 else count


def memmove(
    buf: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap.
    """
    if min(dst_offset, src_offset, length) < 0:
        raise ValueError("offsets and length must be non-negative")
    if max(dst_offset, src_offset) + length > len(buf):
        raise ValueError("region exceeds buffer size")
    buf[dst_offset : dst_offset + length] = bytes(
        buf[src_offset : src_offset + length]
    )
    return buf


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, s1, s2)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes, at least one byte long."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    if count == 0 or size == 0:
        count = size = 1
    return bytearray(count * size)


def realloc(buf: bytearray | None, new_size: int) -> bytearray | None:
    """Resize ``buf`` to ``new_size`` bytes, keeping its contents.

    A missing or empty ``buf`` yields a fresh zeroed buffer. A size of zero
    yields None. A size not larger than the current one returns ``buf`` itself.
    """
    if new_size < 0:
        raise ValueError("size must be non-negative")
    if not buf:
        return bytearray(new_size)
    if new_size == 0:
        return None
    if new_size <= len(buf):
        return buf
    grown = bytearray(new_size)
    grown[: len(buf)] = buf
    return grown


def bit_string(data: bytes) -> str:
    """Return the bits of little-endian ``data`` written most significant first."""
    return "".join(f"{byte:08b}" for byte in reversed(bytes(data)))


def memprint(data: bytes) -> None:
    """Print the bits of ``data`` to standard output, followed by a newline."""
    sys.stdout.write(bit_string(data) + "\n")
    sys.stdout.flush()