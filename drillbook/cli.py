"""Command line front end: run one puzzle over whitespace-separated tokens on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from drillbook.arrays import three_sum
from drillbook.puzzles import decode_words, shortest_tour
from drillbook.strings import (
    int_to_roman,
    is_match,
    is_palindrome_number,
    longest_common_prefix,
    longest_palindrome,
    my_atoi,
    reverse_integer,
    roman_to_int,
    zigzag_convert,
)
from drillbook.textops import (
    compare_version,
    generate_parenthesis,
    is_valid_brackets,
    str_str,
)

Handler = Callable[[list[str]], Iterator[str]]

_GROUP_END = -100
_PREFIX_END = "-1"
_TOUR_NUMBERS = 10


def _pairs(tokens: Iterable[str]) -> Iterator[tuple[str, str]]:
    it = iter(tokens)
    return zip(it, it)


def _palindrome(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield longest_palindrome(token)


def _zigzag(tokens: list[str]) -> Iterator[str]:
    for text, rows in _pairs(tokens):
        yield zigzag_convert(text, int(rows))


def _reverse(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(reverse_integer(int(token)))


def _atoi(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(my_atoi(token))


def _palnum(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(int(is_palindrome_number(int(token))))


def _regex(tokens: list[str]) -> Iterator[str]:
    for text, pattern in _pairs(tokens):
        yield str(int(is_match(text, pattern)))


def _toroman(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield int_to_roman(int(token))


def _fromroman(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(roman_to_int(token))


def _prefix(tokens: list[str]) -> Iterator[str]:
    words = []
    for token in tokens:
        if token == _PREFIX_END:
            break
        words.append(token)
    yield longest_common_prefix(words)


def _threesum(tokens: list[str]) -> Iterator[str]:
    group: list[int] = []
    for token in tokens:
        value = int(token)
        if value != _GROUP_END:
            group.append(value)
            continue
        yield " ".join(",".join(map(str, triplet)) for triplet in three_sum(group))
        group = []


def _valid(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(int(is_valid_brackets(token)))


def _parens(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(len(generate_parenthesis(int(token))))


def _strstr(tokens: list[str]) -> Iterator[str]:
    for haystack, needle in _pairs(tokens):
        yield str(str_str(haystack, needle))


def _version(tokens: list[str]) -> Iterator[str]:
    for first, second in _pairs(tokens):
        yield str(compare_version(first, second))


def _bees(tokens: list[str]) -> Iterator[str]:
    numbers = [float(token) for token in tokens]
    for start in range(0, len(numbers) - _TOUR_NUMBERS + 1, _TOUR_NUMBERS):
        chunk = numbers[start:start + _TOUR_NUMBERS]
        points = list(zip(chunk[0::2], chunk[1::2]))
        yield str(int(shortest_tour(points)))


def _bigsmall(tokens: list[str]) -> Iterator[str]:
    if len(tokens) >= 2:
        int(tokens[0])
        yield " ".join(decode_words(tokens[1]))


_COMMANDS: dict[str, Handler] = {
    "palindrome": _palindrome,
    "zigzag": _zigzag,
    "reverse": _reverse,
    "atoi": _atoi,
    "palnum": _palnum,
    "regex": _regex,
    "toroman": _toroman,
    "fromroman": _fromroman,
    "prefix": _prefix,
    "threesum": _threesum,
    "valid": _valid,
    "parens": _parens,
    "strstr": _strstr,
    "version": _version,
    "bees": _bees,
    "bigsmall": _bigsmall,
}


def main(argv: list[str] | None = None) -> int:
    """Read tokens from stdin, run the chosen puzzle and print one result per line."""
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Run a puzzle over whitespace-separated input read from stdin.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="strstr",
        choices=sorted(_COMMANDS),
        help="puzzle to run (default: strstr)",
    )
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        for line in _COMMANDS[args.command](tokens):
            print(line)
    except ValueError as exc:
        print(f"drillbook: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())