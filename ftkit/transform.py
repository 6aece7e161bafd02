"""String building and splitting: trim, join, split, map and in-place iteration.

Strings end at their first NUL character, if they have one, as in
:mod:`ftkit.strings`.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

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


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that appears in ``charset``."""
    return _terminated(s).strip(_terminated(charset))


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing one (None) counts as absent.

    Raises ValueError when both are missing.
    """
    if s1 is None and s2 is None:
        raise ValueError("at least one string is required")
    return _terminated(s1 or "") + _terminated(s2 or "")


def count_words(s: str, sep: CharLike) -> int:
    """Return the number of non-empty runs of characters other than ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    return [word for word in _terminated(s).split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character.

    ``func`` must return a single character.
    """
    mapped = []
    for index, ch in enumerate(_terminated(s)):
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)


def striteri(s: MutableSequence, func: Callable[[int, MutableSequence], None]) -> None:
    """Call ``func(index, s)`` for each element of ``s`` up to its terminator.

    ``s`` is a mutable sequence of characters (a list of one-character
    strings) or of byte values (a bytearray); ``func`` may rewrite
    ``s[index]`` in place. Iteration stops at the first ``"\\0"`` or ``0``.
    """
    index = 0
    while index < len(s) and s[index] not in (NUL, 0):
        func(index, s)
        index += 1