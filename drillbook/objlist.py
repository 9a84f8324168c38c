"""Object-list helpers: split a make-style list of file names and sort it."""

from __future__ import annotations


def tokenize_names(text: str) -> list[str]:
    """Return the file names in ``text`` in the order they appear.

    Names are separated by spaces, tabs and newlines. Backslash line
    continuations are dropped, including one written straight after a name.
    """
    return text.replace("\\", " ").split()


def sorted_names(text: str) -> list[str]:
    """Return the file names in ``text`` in lexicographical order."""
    return sorted(tokenize_names(text))