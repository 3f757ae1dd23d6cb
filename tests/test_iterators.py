import pytest

from exercisekit.iterators import (
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    capitalize_first,
    capitalize_join,
    capitalize_words,
    divide,
    divide_all,
    factorial,
    offset_sums,
)


def test_divide_success():
    assert divide(81, 9) == 9


def test_divide_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_zero():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_zero_by_something():
    assert divide(0, 81) == 0


def test_errors_share_base():
    with pytest.raises(DivisionError):
        divide(1, 0)
    with pytest.raises(DivisionError):
        divide(5, 2)


def test_divide_all_collects_results():
    assert divide_all([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_divide_all_raises_first_failure():
    with pytest.raises(NotDivisibleError) as info:
        divide_all([27, 28, 29], 27)
    assert info.value.dividend == 28


def test_capitalize_first():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_capitalize_words():
    assert capitalize_words(["hello", "world"]) == ["Hello", "World"]


def test_capitalize_join():
    assert capitalize_join(["hello", " ", "world"]) == "Hello World"


@pytest.mark.parametrize("num, expected", [(1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_recurrence():
    for n in range(1, 20):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def test_offset_sums_cover_everything():
    numbers = list(range(100))
    sums = offset_sums(numbers, range(5), 5)
    assert sum(sums) == sum(numbers)


def test_offset_sums_single_offset_step_one():
    numbers = [4, 8, 15, 16, 23, 42]
    assert offset_sums(numbers, [0], 1) == [sum(numbers)]


def test_offset_sums_default_has_eight_offsets():
    numbers = list(range(100))
    sums = offset_sums(numbers)
    assert len(sums) == 8
    assert sums[5] == sums[0] - numbers[0] - numbers[95] + sum(numbers[5::5]) - sum(numbers[5::5]) + numbers[95] - 0


def test_offset_sums_past_end_is_zero():
    assert offset_sums([1, 2, 3], [10], 5) == [0]


def test_offset_sums_bad_step():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], [0], 0)