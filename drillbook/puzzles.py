"""Small contest puzzles: shortest closed tour and bit-group decoding."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import permutations

_GROUP = 9


def shortest_tour(points: Sequence[tuple[float, float]]) -> float:
    """Return the shortest route from the origin through every point and back."""
    origin = (0.0, 0.0)
    best = math.inf
    for order in permutations(points):
        length = 0.0
        here = origin
        for point in order:
            length += math.dist(here, point)
            here = point
        length += math.dist(here, origin)
        best = min(best, length)
    return best


def decode_words(bits: str) -> list[str]:
    """Decode groups of nine characters into eight-character words.

    A group whose first character is ``0`` holds its word reversed;
    any other flag holds it in order. A trailing partial group is ignored.
    """
    words = []
    for start in range(0, len(bits) - _GROUP + 1, _GROUP):
        flag, body = bits[start], bits[start + 1:start + _GROUP]
        words.append(body[::-1] if flag == "0" else body)
    return words