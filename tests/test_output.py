import os

import pytest
from hypothesis import given, strategies as st

from ftlib.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
        os.close(write_fd)
        write_fd = None
        chunks = []
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
    finally:
        if write_fd is not None:
            os.close(write_fd)
        os.close(read_fd)


def test_putchar_writes_character():
    assert _capture(lambda fd: putchar_fd("x", fd)) == b"x"


def test_putchar_rejects_longer_strings():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=50))
def test_putstr_round_trip(s):
    assert _capture(lambda fd: putstr_fd(s, fd)) == s.encode()


@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=50))
def test_putendl_appends_newline(s):
    assert _capture(lambda fd: putendl_fd(s, fd)) == s.encode() + b"\n"


def test_none_writes_nothing():
    assert _capture(lambda fd: putstr_fd(None, fd)) == b""
    assert _capture(lambda fd: putendl_fd(None, fd)) == b""


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_round_trip(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


def test_putnbr_extremes():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"
    assert _capture(lambda fd: putnbr_fd(0, fd)) == b"0"