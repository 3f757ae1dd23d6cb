"""Error-handling examples: validated values and parsing that raises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a strictly formed decimal integer that must fit in ``[low, high]``."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign, digits = 1, text
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = sign * int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text for a name, which must not be empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed-in number of items."""
    qty = _parse_int(item_quantity, I32_MIN, I32_MAX)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    if not I32_MIN <= cost <= I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def afford(tokens: int, item_quantity: str) -> str:
    """Say whether the purchase is affordable and how many tokens remain."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value cannot become a positive non-zero integer."""

    description = "Invalid"

    def __str__(self) -> str:
        return self.description


class NegativeError(CreationError):
    """The value was negative."""

    description = "Negative"


class ZeroError(CreationError):
    """The value was zero."""

    description = "Zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ZeroError()
        if self.value < 0:
            raise NegativeError()


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive non-zero integer.

    Read failures, malformed numbers and invalid values all raise.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    num = _parse_int(line.strip(), I64_MIN, I64_MAX)
    return PositiveNonzeroInteger(num)


def pop_too_much() -> bool:
    """Pop from a one-item list twice without failing on the empty list."""
    items = [3]
    last = items.pop()
    print(f"The last item in the list is {last}")
    if items:
        print(f"The second-to-last item in the list is {items.pop()}")
    else:
        print("There is no second-to-last item in the list")
    return True