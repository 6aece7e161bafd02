"""C-style string routines over Python strings.

A string ends at its first NUL character, if it has one. Searches return
an index into the string, or None where nothing is found. Searching for
NUL finds the terminator, which sits at the string's length.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

NUL = "\0"


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL."""
    return s.split(NUL, 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None."""
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None."""
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first differing pair, with
    the end of a string counting as code 0; 0 when they agree.
    """
    _check_non_negative(n, "count")
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue=NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _check_non_negative(n, "count")
    wanted = _terminated(needle)
    if not wanted:
        return 0
    index = _terminated(haystack)[:n].find(wanted)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; a size of 0
    copies nothing.
    """
    _check_non_negative(size, "size")
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a total room of ``size`` including the terminator.

    Returns the resulting text and the length it tried to create. When
    ``dest`` already fills the room, it comes back unchanged and the length
    reported is ``size`` plus the length of ``src``.
    """
    _check_non_negative(size, "size")
    head = _terminated(dest)
    tail = _terminated(src)
    if size == 0 or len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start : start + length]