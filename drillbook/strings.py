"""String and number puzzles: substrings, palindromes, parsing and numerals."""

from __future__ import annotations

from collections.abc import Sequence

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_ROMAN_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_ROMAN_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ROMAN_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_ROMAN_THOUSANDS = ("", "M", "MM", "MMM")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window = ""
    longest = 0
    for ch in s:
        pos = window.find(ch)
        if pos != -1:
            window = window[pos + 1:]
        window += ch
        longest = max(longest, len(window))
    return longest


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost wins a tie."""
    best_start, best_len = 0, 0
    n = len(s)
    for center in range(2 * n - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < n and s[left] == s[right]:
            left -= 1
            right += 1
        start, length = left + 1, right - left - 1
        if length > best_len or (length == best_len and start < best_start):
            best_start, best_len = start, length
    return s[best_start:best_start + best_len]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if len(s) < num_rows or num_rows == 1:
        return s
    cycle = 2 * num_rows - 2
    rows = [[] for _ in range(num_rows)]
    for i, ch in enumerate(s):
        pos = i % cycle
        rows[pos if pos < num_rows else cycle - pos].append(ch)
    return "".join("".join(row) for row in rows)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if the result leaves 32-bit range."""
    magnitude = int(str(abs(x))[::-1])
    if magnitude > INT32_MAX:
        return 0
    return -magnitude if x < 0 else magnitude


def my_atoi(text: str) -> int:
    """Parse a leading integer like C ``atoi``, clamped to the 32-bit range."""
    rest = text.lstrip(" ")
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    value = int("".join(digits))
    if negative:
        value = -value
    return max(INT32_MIN, min(INT32_MAX, value))


def is_palindrome_number(x: int) -> bool:
    """Return whether the decimal form of ``x`` reads the same both ways."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def is_match(s: str, p: str) -> bool:
    """Match ``s`` against pattern ``p`` where ``.`` is any char and ``*`` repeats the previous one."""
    rows, cols = len(s) + 1, len(p) + 1
    dp = [[False] * cols for _ in range(rows)]
    dp[0][0] = True
    for j in range(2, cols):
        dp[0][j] = p[j - 1] == "*" and dp[0][j - 2]

    for i in range(1, rows):
        for j in range(1, cols):
            pc = p[j - 1]
            if s[i - 1] == pc or pc == ".":
                dp[i][j] = dp[i - 1][j - 1]
            elif pc == "*" and j >= 2:
                prev = p[j - 2]
                repeat = dp[i - 1][j] and (s[i - 1] == prev or prev == ".")
                dp[i][j] = repeat or dp[i][j - 2]
    return dp[-1][-1]


def int_to_roman(num: int) -> str:
    """Write ``num`` (0 to 3999) as a Roman numeral; 0 gives an empty string."""
    if not 0 <= num <= 3999:
        raise ValueError(f"cannot write {num} as a Roman numeral")
    return (
        _ROMAN_THOUSANDS[num // 1000]
        + _ROMAN_HUNDREDS[num % 1000 // 100]
        + _ROMAN_TENS[num % 100 // 10]
        + _ROMAN_ONES[num % 10]
    )


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; a smaller symbol before a larger one is subtracted."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    it = iter(range(len(values)))
    for i in it:
        current = values[i]
        following = values[i + 1] if i + 1 < len(values) else 0
        if current < following:
            total += following - current
            next(it, None)
        else:
            total += current
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    first, *others = strs
    for i, ch in enumerate(first):
        if any(len(other) <= i or other[i] != ch for other in others):
            return first[:i]
    return first