"""Iterator examples: checked division, capitalisation, factorials and shared sums."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

U64_MAX = 2**64 - 1


class DivisionError(ArithmeticError):
    """A division that cannot produce a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number by ``divisor``; the first failure is raised."""
    return [divide(n, divisor) for n in numbers]


def capitalize_first(text: str) -> str:
    """Return the text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise the first character of each word."""
    return [capitalize_first(word) for word in words]


def capitalize_join(words: Iterable[str]) -> str:
    """Capitalise each word and join them into one string."""
    return "".join(capitalize_words(words))


def factorial(num: int) -> int:
    """Return ``num!`` for a number whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


def offset_sums(
    numbers: Sequence[int],
    offsets: Iterable[int] = range(8),
    step: int = 5,
) -> list[int]:
    """Sum ``numbers[offset::step]`` for each offset, one worker thread per offset.

    The workers share the same sequence rather than each taking a copy.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    shared = numbers
    offsets = list(offsets)
    if any(offset < 0 for offset in offsets):
        raise ValueError("offsets must be non-negative")
    if not offsets:
        return []

    def _sum_from(offset: int) -> int:
        return sum(shared[i] for i in range(offset, len(shared), step))

    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        return list(pool.map(_sum_from, offsets))