"""Word splitting and substring search used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs.

    Other whitespace, such as newlines, is kept inside the words.
    """
    return [word for word in _BLANKS.split(text) if word]


def find(text: str, needle: str) -> int:
    """Position of the first occurrence of ``needle`` in ``text``, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Position of the first ``needle`` that lies outside double quotes, or -1.

    Each double-quote character toggles the quoted state before the match
    at its own position is tried.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    in_quotes = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(needle, pos):
            return pos
    return -1