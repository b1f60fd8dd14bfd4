"""Puzzles over strings: palindromes, brackets, numerals and word handling."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Callable, Iterable, Sequence

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CLOSE_TO_OPEN = {")": "(", "]": "[", "}": "{"}


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    chars = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return chars == chars[::-1]


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN.get(c, 0) for c in s]
    return sum(-v if v < following else v for v, following in zip(values, values[1:] + [0]))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = strs[0]
    for word in strs[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
    return prefix


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing runs of spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every closing bracket closes the most recent open one and none stay open."""
    stack: list[str] = []
    for ch in s:
        if ch in _CLOSE_TO_OPEN:
            if not stack or stack.pop() != _CLOSE_TO_OPEN[ch]:
                return False
        else:
            stack.append(ch)
    return not stack


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("number of pairs must not be negative")
    table: list[list[str]] = [[""]]
    for k in range(1, n + 1):
        table.append(
            [
                "(" + left + ")" + right
                for i in range(k)
                for left in table[i]
                for right in table[k - i - 1]
            ]
        )
    return table[n]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the letters of ``s``."""
    return Counter(s) == Counter(t)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be cut out of the letters of ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").split(" ")[-1])


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError("number of rows must be positive")
    if num_rows == 1 or not s:
        return s
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, ch in enumerate(s):
        phase = index % cycle
        rows[min(phase, cycle - phase)].append(ch)
    return "".join("".join(row) for row in rows)


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; among equal lengths the last one found wins."""
    best_lo = best_hi = 0
    for center in range(len(s)):
        lo, hi = max(
            _expand(s, center, center),
            _expand(s, center, center + 1),
            key=lambda bounds: bounds[1] - bounds[0],
        )
        if hi - lo >= best_hi - best_lo:
            best_lo, best_hi = lo, hi
    return s[best_lo:best_hi]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]