"""Small worked examples: variables, functions, conditionals and primitives."""

from __future__ import annotations

from collections.abc import Sized

BULK_THRESHOLD = 40


def calculate_apple_price(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    unit_price = 1 if quantity > BULK_THRESHOLD else 2
    return quantity * unit_price


def times_two(num: int) -> int:
    """Return twice the number."""
    return num * 2


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def is_even(num: int) -> bool:
    """Tell whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of the number."""
    return num * num


def ring_calls(num: int) -> list[str]:
    """Return one ring line for each of ``num`` calls."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def classify_character(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_verdict(items: Sized) -> str:
    """Comment on whether a collection holds at least 100 items."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."