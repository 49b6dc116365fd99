"""Small text-scanning helpers used when reading XPM sources."""

from __future__ import annotations

import re

__all__ = ["split_words", "find", "find_unquoted", "strip_comments"]

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split *text* into words separated by runs of spaces and tabs.

    Only spaces and tabs separate words; other whitespace stays inside them.
    """
    return [word for word in _BLANKS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first *needle* in *text*, or -1.

    The search is refused (-1) when *needle* is longer than *limit*.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes.

    The quote state flips on every '"' met while scanning; a match may only
    start where the scan is outside quotes.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    last = len(text) - len(needle)
    if last < 0:
        return -1
    quoted = False
    for pos, char in enumerate(text[: last + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(chars: list[str], start: int, count: int) -> None:
    stop = min(len(chars), start + max(count, 0))
    chars[start:stop] = [" "] * (stop - start)


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    Block comments are blanked first, then line comments together with the
    newline that ends them.  The length of the text is preserved.
    """
    chars = list(text)
    size = len(chars)
    while (begin := find_unquoted("".join(chars), "/*", size)) != -1:
        after = "".join(chars[begin + 2:])
        end = find(after, "*/", size - begin - 2)
        _blank(chars, begin, end + 4)
    while (begin := find_unquoted("".join(chars), "//", size)) != -1:
        after = "".join(chars[begin + 2:])
        end = find(after, "\n", size - begin - 2)
        _blank(chars, begin, end + 3)
    return "".join(chars)