"""Helpers for strings, byte buffers, integer and float conversion, and linked lists."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "dtoa",
    "fmath",
    "integers",
    "linked",
    "memory",
    "output",
    "search",
    "strings",
]