"""Substring search and splitting into words on spaces and tabs.

Text ends at its first NUL character, if it has one.
"""

from __future__ import annotations

import re
from typing import List, Optional

_BLANKS = re.compile(r"[ \t]+")


def _terminated(s: str) -> str:
    return s.split("\0", 1)[0]


def _prepare(text: str, find: str, length: int) -> Optional[tuple[str, str]]:
    wanted = _terminated(find)
    if not wanted:
        raise ValueError("the string to find must not be empty")
    if len(wanted) > length:
        return None
    return _terminated(text), wanted


def str_str(text: str, find: str, length: int) -> Optional[int]:
    """Return the index of the first ``find`` in ``text``, or None.

    When ``find`` is longer than ``length`` nothing is searched and None
    is returned.
    """
    prepared = _prepare(text, find, length)
    if prepared is None:
        return None
    haystack, wanted = prepared
    index = haystack.find(wanted)
    return None if index < 0 else index


def str_str_quoted(text: str, find: str, length: int) -> Optional[int]:
    """Like :func:`str_str`, but skip matches that lie inside double quotes.

    A double quote opens or closes a quoted span; a match may begin at the
    closing quote of a span but not at its opening one.
    """
    prepared = _prepare(text, find, length)
    if prepared is None:
        return None
    haystack, wanted = prepared
    quoted = False
    for pos in range(len(haystack) - len(wanted) + 1):
        if haystack[pos] == '"':
            quoted = not quoted
        if not quoted and haystack.startswith(wanted, pos):
            return pos
    return None


def str_to_wordtab(text: str) -> List[str]:
    """Split ``text`` into the words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(_terminated(text)) if word]