"""Length, search, comparison and bounded copies of NUL-terminated text."""

from __future__ import annotations

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
]

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strlen(s: str) -> int:
    """Return the number of characters of ``s`` before its first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    if _single(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    if _single(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns 0 when they agree, otherwise the difference between the code
    points of the first pair that differs, the end of a string counting as 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    a_text, b_text = _terminated(s1), _terminated(s2)
    for index in range(n):
        a = ord(a_text[index]) if index < len(a_text) else 0
        b = ord(b_text[index]) if index < len(b_text) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` within the first ``length`` characters.

    The whole of ``needle`` must fit inside that window. An empty needle is
    found at index 0. Returns None when there is no match.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    wanted = _terminated(needle)
    if not wanted:
        return 0
    index = _terminated(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters, terminator included.

    Returns the copied text, at most ``dstsize - 1`` characters long (empty
    when ``dstsize`` is 0), and the full length of ``src``, so truncation
    shows as a copy shorter than that length.
    """
    if dstsize < 0:
        raise ValueError("dstsize must be non-negative")
    text = _terminated(src)
    copied = text[: dstsize - 1] if dstsize else ""
    return copied, len(text)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize`` characters.

    Returns the resulting text and the length of the string it tried to
    create. When ``dst`` already fills the buffer it comes back unchanged.
    """
    if dstsize < 0:
        raise ValueError("dstsize must be non-negative")
    head = _terminated(dst)
    tail = _terminated(src)
    dstlen = min(len(head), dstsize)
    attempted = dstlen + len(tail)
    if dstsize == dstlen:
        return head, attempted
    room = dstsize - dstlen - 1
    return head + tail[:room], attempted


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _terminated(s)