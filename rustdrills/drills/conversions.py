"""Conversions between text, numbers and small records."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def _parse_age(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid age: {text!r}")
    age = int(text)
    if age > _USIZE_MAX:
        raise ValueError(f"age too large: {text!r}")
    return age


@dataclass(frozen=True)
class Person:
    """A person's name and age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Read "name,age"; raise ValueError if the text does not describe a person."""
        if not text:
            raise ValueError("cannot be empty")
        name, *rest = text.split(",")
        if not name:
            raise ValueError("No name")
        if not rest:
            raise ValueError("no age provided")
        try:
            age = _parse_age(rest[0])
        except ValueError as err:
            raise ValueError("error parsing age") from err
        return cls(name=name, age=age)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Read "name,age", falling back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ValueError:
            return cls.default()


@dataclass(frozen=True)
class Color:
    """An RGB colour with byte-sized channels."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three channel values; raise ValueError if they do not fit."""
        channels = tuple(value)
        if len(channels) > 3:
            raise ValueError("Slice too large")
        if any(not 0 <= channel <= 255 for channel in channels):
            raise ValueError("Invalid value")
        if len(channels) < 3:
            raise ValueError("Slice too short")
        red, green, blue = channels
        return cls(red=red, green=green, blue=blue)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values, 0.0) / len(values)