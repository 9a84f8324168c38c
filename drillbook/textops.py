"""Text puzzles: bracket balancing, parenthesis generation, search and versions."""

from __future__ import annotations

from itertools import zip_longest

from drillbook.strings import my_atoi

_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid_brackets(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed in the right order.

    Every character is stacked; a closing bracket cancels the opener on top.
    The text is valid when nothing is left over.
    """
    stack: list[str] = []
    for ch in s:
        if stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses.

    Strings that close earlier come first.
    """
    results: list[str] = []

    def extend(prefix: str, opens_left: int, closes_left: int) -> None:
        if opens_left <= 0 and closes_left <= 0:
            results.append(prefix)
            return
        if opens_left == 0:
            extend(prefix + ")", opens_left, closes_left - 1)
        elif opens_left == closes_left:
            extend(prefix + "(", opens_left - 1, closes_left)
        else:
            extend(prefix + ")", opens_left, closes_left - 1)
            extend(prefix + "(", opens_left - 1, closes_left)

    extend("", n, n)
    return results


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is found at index 0.
    """
    return haystack.find(needle)


def _revision_numbers(version: str) -> list[int]:
    return [my_atoi(part) for part in version.split(".") if part]


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings; return -1, 0 or 1.

    Each part is read as a number, so leading zeros do not count, and
    missing trailing parts count as zero.
    """
    pairs = zip_longest(
        _revision_numbers(version1), _revision_numbers(version2), fillvalue=0
    )
    for a, b in pairs:
        if a < b:
            return -1
        if a > b:
            return 1
    return 0