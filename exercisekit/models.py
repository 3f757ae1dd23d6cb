"""Data-modelling examples: messages, state, structs, strings and modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

_FRUIT = "Pear"
_OTHER_FRUIT = "Apple"
_VEGGIE = "Cucumber"
_OTHER_VEGGIE = "Carrot"
_SAUSAGE = "sausage!"


def _check_u8(**values: int) -> None:
    for name, value in values.items():
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Ask the state to print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Ask the state to move to a position."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(x=self.x, y=self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Ask the state to change its colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(red=self.red, green=self.green, blue=self.blue)


Message = Quit | Echo | Move | ChangeColor


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(x=self.x, y=self.y)


@dataclass
class State:
    """Colour, position and quit flag, updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        red, green, blue = color
        _check_u8(red=red, green=green, blue=blue)
        self.color = (red, green, blue)

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(x, y):
                self.move_position(Point(x, y))
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether the word is one of the known colour words."""
    return attempt in ("green", "blue", "red")


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def favorite_snacks() -> tuple[str, str]:
    """Return the favourite fruit and vegetable."""
    return _FRUIT, _VEGGIE


def make_sausage() -> str:
    """Print what the factory makes and return it."""
    product = _SAUSAGE
    print(product)
    return product