"""Integer puzzles: unpaired values, FizzBuzz, step counting and digit palindromes."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def single_number(nums: Iterable[int]) -> int:
    """Return the one value left over when every other value appears in pairs."""
    return reduce(xor, nums, 0)


def _fizz_buzz_label(i: int) -> str:
    label = ("Fizz" if i % 3 == 0 else "") + ("Buzz" if i % 5 == 0 else "")
    return label or str(i)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz labels for 1 through ``n``."""
    return [_fizz_buzz_label(i) for i in range(1, n + 1)]


def number_of_steps(num: int) -> int:
    """Count the steps that take ``num`` to zero by halving when even and subtracting one when odd."""
    if num <= 0:
        return 0
    # Each bit costs one halving, each set bit one subtraction; the top bit needs no halving.
    return num.bit_length() + bin(num).count("1") - 1


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]