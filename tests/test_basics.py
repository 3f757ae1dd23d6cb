import pytest

from exercisekit.basics import (
    array_verdict,
    bigger,
    calculate_apple_price,
    classify_character,
    describe_cat,
    is_even,
    ring_calls,
    sale_price,
    square,
    times_two,
)


def test_verify_apple_prices():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(65) == 65


def test_apple_threshold_is_exclusive():
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(41) == 41


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_is_true_when_even():
    assert is_even(4)


def test_is_false_when_odd():
    assert not is_even(5)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_of_equal_numbers():
    assert bigger(7, 7) == 7


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_ring_calls():
    assert ring_calls(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert ring_calls(0) == []


@pytest.mark.parametrize(
    ("ch", "expected"),
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(ch, expected):
    assert classify_character(ch) == expected


def test_classify_character_rejects_strings():
    with pytest.raises(ValueError):
        classify_character("ab")


def test_array_verdict():
    assert array_verdict(["Are we there yet?"] * 100) == "Wow, that's a big array!"
    assert array_verdict([1, 2, 3]) == "Meh, I eat arrays like that for breakfast."


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_describe_cat_whole_age():
    assert describe_cat(("Tom", 3.0)) == "Tom is 3 years old."