import pytest

from rustdrills.drills.standard_library_types import (
    Cons,
    DivideByZero,
    DivisionError,
    Nil,
    NotDivisibleError,
    capitalize_first,
    capitalize_joined,
    capitalize_words,
    create_empty_list,
    create_non_empty_list,
    divide,
    factorial,
    offset_sum,
    parallel_offset_sums,
)

NUMBERS = list(range(100))


def test_offset_sum_small():
    assert offset_sum([1, 2, 3, 4, 5, 6, 7], 1) == 9


def test_offset_sum_past_end():
    assert offset_sum([1, 2, 3], 10) == 0


def test_offset_sum_negative_offset():
    with pytest.raises(ValueError):
        offset_sum(NUMBERS, -1)


def test_parallel_sums_match_sequential():
    sums = parallel_offset_sums(NUMBERS)
    assert len(sums) == 8
    assert sums == [offset_sum(NUMBERS, offset) for offset in range(8)]


def test_first_five_offsets_cover_everything():
    sums = parallel_offset_sums(NUMBERS)
    assert sum(sums[:5]) == sum(NUMBERS)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_non_empty_list() == Cons(32, Nil())
    assert create_empty_list() != create_non_empty_list()


def test_capitalize_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_joined(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as excinfo:
        divide(81, 6)
    assert (excinfo.value.dividend, excinfo.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZero):
        divide(81, 0)


def test_divide_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_result_with_list():
    numbers = [27, 297, 38502, 81]
    assert [divide(n, 27) for n in numbers] == [1, 11, 1426, 3]


def test_list_with_failure():
    with pytest.raises(NotDivisibleError):
        [divide(n, 27) for n in [27, 28]]


def test_factorial_of_1():
    assert factorial(1) == 1


def test_factorial_of_2():
    assert factorial(2) == 2


def test_factorial_of_4():
    assert factorial(4) == 24


def test_factorial_of_0():
    assert factorial(0) == 1


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)