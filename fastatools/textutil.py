"""Small string helpers shared by the command-line tools."""

from __future__ import annotations

import re

_PATH_SEPARATORS = re.compile(r"[/ .]+")


def prefix_equal(first: str, second: str) -> bool:
    """Return True when the two strings agree over the length of the shorter one."""
    return all(a == b for a, b in zip(first, second))


def split_path_words(text: str) -> list[str]:
    """Split text on '/', ' ' and '.', dropping empty pieces."""
    return [word for word in _PATH_SEPARATORS.split(text) if word]


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def capitalize_words(text: str) -> str:
    """Upper-case every ASCII letter that starts a word.

    A letter starts a word when it is the first character or follows a
    character that is not an ASCII letter or digit. Other letters are
    left untouched.
    """
    result = []
    previous = ""
    for char in text:
        if char.isascii() and char.isalpha() and not _is_ascii_alnum(previous):
            result.append(char.upper())
        else:
            result.append(char)
        previous = char
    return "".join(result)