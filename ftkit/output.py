"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

from ftkit.conversions import itoa

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character, given as a string or a code, to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL to ``stream``."""
    stream.write(s.split("\0", 1)[0])


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL, then a newline, to ``stream``."""
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of the 32-bit integer ``n`` to ``stream``."""
    stream.write(itoa(n))