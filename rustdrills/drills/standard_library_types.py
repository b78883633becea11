"""Shared data across threads, recursive lists, iterators and checked division."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_STEP = 5
_WORKERS = 8
_U64_MAX = 2**64 - 1


def offset_sum(numbers: Sequence[int], offset: int) -> int:
    """Sum of every fifth number, starting at the given offset."""
    if offset < 0:
        raise ValueError("offset must not be negative")
    return sum(numbers[offset::_STEP])


def parallel_offset_sums(numbers: Sequence[int]) -> list[int]:
    """Offset sums for offsets 0 to 7, each computed in its own thread."""
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=_WORKERS) as pool:
        return list(pool.map(lambda offset: offset_sum(shared, offset), range(_WORKERS)))


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(32, Nil())


def capitalize_first(text: str) -> str:
    """The text with its first character upper-cased."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """The capitalised words joined with nothing in between."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class DivideByZero(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


def divide(a: int, b: int) -> int:
    """Exact quotient of a by b; raise a DivisionError if there is none."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def factorial(num: int) -> int:
    """num! for an unsigned num, within the 64-bit unsigned range."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result