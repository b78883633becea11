"""Reporting failures with exceptions instead of sentinel values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual failure messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in quantity of items, fee included.

    Raises ValueError if the quantity is not a 32-bit integer, and
    OverflowError if the cost does not fit in one.
    """
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost <= 2**31 - 1:
        raise OverflowError("cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Spend tokens on items if affordable; return the tokens left and a message."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    remaining = tokens - cost
    return remaining, f"You now have {remaining} tokens."


class CreationError(ValueError):
    """A number could not be accepted as positive and nonzero."""

    NEGATIVE = "Number is negative"
    ZERO = "Number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line holding a positive, nonzero integer.

    Errors from reading propagate unchanged; a line that is not a 64-bit
    integer raises ValueError; zero or a negative number raises CreationError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    number = _parse_int(line.strip(), 64)
    return PositiveNonzeroInteger(number)