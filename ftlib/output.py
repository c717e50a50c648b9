"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _write_all(fd, c.encode())


def putstr_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written when ``s`` is None."""
    if s is None:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline; nothing is written when ``s`` is None."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the integer ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode())