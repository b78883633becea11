"""Booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Greetings that apply at this time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sequence) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence) -> Sequence:
    """The elements at positions 1 to 3."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: tuple) -> object:
    return numbers[1]